"""Vault share accounting and interest accrual.

Deposits and loans are tracked as shares of a vault's deposited and
borrowed funds. Conversions use mul_div_64 with the caller's rounding so
that the client rounds in the same direction as the program (shares minted
round down, debt owed rounds up).
"""

from __future__ import annotations

import structlog

from tuna_core.constants import INTEREST_ACCRUE_MIN_INTERVAL
from tuna_core.math.borrow_curve import DEFAULT_BORROW_CURVE, BorrowCurve
from tuna_core.math.fixed_point import Fixed128
from tuna_core.math.full_math import Rounding, mul_div_64
from tuna_core.models.accounts import Vault
from tuna_core.safe_int import S, require_uint

logger = structlog.get_logger()

__all__ = [
    "funds_to_shares",
    "shares_to_funds",
    "calculate_deposited_shares",
    "calculate_deposited_funds",
    "calculate_borrowed_shares",
    "calculate_borrowed_funds",
    "get_utilization",
    "get_utilization_fixed",
    "compounded_interest_rate",
    "accrue_interest",
]


def funds_to_shares(funds: int, total_funds: int, total_shares: int, rounding: Rounding) -> int:
    """Convert funds to shares; one share per unit while the pool is empty."""
    if total_funds > 0:
        return mul_div_64(funds, total_shares, total_funds, rounding)
    return funds


def shares_to_funds(shares: int, total_funds: int, total_shares: int, rounding: Rounding) -> int:
    """Convert shares to funds; one unit per share while no shares exist."""
    if total_shares > 0:
        return mul_div_64(shares, total_funds, total_shares, rounding)
    return shares


def calculate_deposited_shares(vault: Vault, funds: int, rounding: Rounding) -> int:
    return funds_to_shares(funds, vault.deposited_funds, vault.deposited_shares, rounding)


def calculate_deposited_funds(vault: Vault, shares: int, rounding: Rounding) -> int:
    return shares_to_funds(shares, vault.deposited_funds, vault.deposited_shares, rounding)


def calculate_borrowed_shares(vault: Vault, funds: int, rounding: Rounding) -> int:
    return funds_to_shares(funds, vault.borrowed_funds, vault.borrowed_shares, rounding)


def calculate_borrowed_funds(vault: Vault, shares: int, rounding: Rounding) -> int:
    return shares_to_funds(shares, vault.borrowed_funds, vault.borrowed_shares, rounding)


def get_utilization(vault: Vault) -> float:
    """Borrowed / deposited funds as a float; 1.0 for an empty vault."""
    if vault.deposited_funds > 0:
        return vault.borrowed_funds / vault.deposited_funds
    return 1.0


def get_utilization_fixed(vault: Vault) -> Fixed128:
    """Borrowed / deposited funds as Fixed128; ONE for an empty vault."""
    if vault.deposited_funds > 0:
        return Fixed128.from_ratio(vault.borrowed_funds, vault.deposited_funds)
    return Fixed128.one()


def compounded_interest_rate(r: float) -> float:
    """First three Taylor terms of e^r - 1, approximating continuous compounding."""
    t1 = r
    t2 = r * r / 2.0
    t3 = t2 * r / 3.0
    return t1 + t2 + t3


def accrue_interest(
    vault: Vault, timestamp: int, curve: BorrowCurve = DEFAULT_BORROW_CURVE
) -> Vault:
    """Return the vault snapshot with interest accrued up to `timestamp`.

    The vault's per-second rate is scaled by the borrow curve multiplier at
    the current utilization. Accrual is skipped while less than
    INTEREST_ACCRUE_MIN_INTERVAL seconds have elapsed.

    Raises:
        ArithmeticUnderflow: If timestamp precedes the last update
        ArithmeticOverflow: If timestamp is not a u64 or the accrued funds
            exceed u64
    """
    require_uint(timestamp, 64, "timestamp")
    elapsed = (S(timestamp) - vault.last_update_timestamp).value

    if vault.borrowed_funds == 0:
        return vault.model_copy(update={"last_update_timestamp": timestamp})

    if elapsed < INTEREST_ACCRUE_MIN_INTERVAL:
        return vault

    utilization = get_utilization(vault)
    multiplier = curve.sample_float(utilization)
    interest_rate = Fixed128.from_bits(vault.interest_rate).to_float() * multiplier

    interest = compounded_interest_rate(interest_rate * elapsed)
    interest_amount = int(interest * vault.borrowed_funds)

    borrowed_funds = (S(vault.borrowed_funds) + interest_amount).to_u64()
    deposited_funds = (S(vault.deposited_funds) + interest_amount).to_u64()

    logger.debug(
        "vault_interest_accrued",
        mint=vault.mint,
        elapsed=elapsed,
        utilization=utilization,
        multiplier=multiplier,
        interest_amount=interest_amount,
    )

    return vault.model_copy(
        update={
            "borrowed_funds": borrowed_funds,
            "deposited_funds": deposited_funds,
            "last_update_timestamp": timestamp,
        }
    )
