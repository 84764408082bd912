"""Valuation of leveraged liquidity positions.

Position totals and debt are valued in token B using the pool's current
sqrt price. Vault snapshots must already have interest accrued.
"""

from __future__ import annotations

import structlog

from tuna_core.constants import HUNDRED_PERCENT, LEVERAGE_ONE, TOKEN_A, TOKEN_B
from tuna_core.errors import InvalidArgument, LeverageOutOfRange
from tuna_core.lending.vault import calculate_borrowed_funds
from tuna_core.math.fixed_point import U64F64, Fixed128
from tuna_core.math.full_math import Rounding
from tuna_core.math.liquidity import get_amounts_for_liquidity
from tuna_core.math.price import sqrt_price_x64_to_price_x64
from tuna_core.models.accounts import LiquidityPosition, Market, Vault
from tuna_core.safe_int import S

logger = structlog.get_logger()

__all__ = [
    "get_total_balance",
    "compute_total_and_debt",
    "compute_leverage",
    "is_healthy",
    "get_max_leverage",
    "get_liquidation_price",
]


def get_total_balance(position: LiquidityPosition, sqrt_price: int) -> tuple[int, int]:
    """Token A and B amounts of the position's liquidity at `sqrt_price`."""
    return get_amounts_for_liquidity(
        sqrt_price, position.sqrt_price_lower, position.sqrt_price_upper, position.liquidity
    )


def _value_in_b(amount_a: int, amount_b: int, price: U64F64) -> int:
    value_a = (U64F64.from_num(amount_a) * price).to_num()
    return (S(value_a) + amount_b).to_u64()


def compute_total_and_debt(
    position: LiquidityPosition, sqrt_price: int, vault_a: Vault, vault_b: Vault
) -> tuple[int, int]:
    """Position total (liquidity plus leftovers) and debt, both in token B.

    Debt is rounded up from the loan shares.

    Raises:
        ArithmeticOverflow: If a value exceeds u64
    """
    amount_a, amount_b = get_total_balance(position, sqrt_price)

    total_a = (S(amount_a) + position.leftovers_a).to_u64()
    total_b = (S(amount_b) + position.leftovers_b).to_u64()

    price = sqrt_price_x64_to_price_x64(sqrt_price)
    total = _value_in_b(total_a, total_b, price)

    debt_a = calculate_borrowed_funds(vault_a, position.loan_shares_a, Rounding.UP)
    debt_b = calculate_borrowed_funds(vault_b, position.loan_shares_b, Rounding.UP)
    debt = _value_in_b(debt_a, debt_b, price)

    return total, debt


def compute_leverage(
    position: LiquidityPosition, sqrt_price: int, vault_a: Vault, vault_b: Vault
) -> Fixed128:
    """Leverage total / (total - debt); an empty position is 1.0x.

    Raises:
        LeverageOutOfRange: If the debt is not below the total
    """
    total, debt = compute_total_and_debt(position, sqrt_price, vault_a, vault_b)

    if total == 0:
        return Fixed128.one()

    if debt >= total:
        raise LeverageOutOfRange(f"Debt {debt} is not below position total {total}")

    return Fixed128.from_num(total) / Fixed128.from_num(total - debt)


def is_healthy(
    position: LiquidityPosition,
    sqrt_price: int,
    market: Market,
    vault_a: Vault,
    vault_b: Vault,
) -> tuple[bool, int]:
    """Check the position against the market liquidation threshold.

    Returns:
        (healthy, debt-to-total ratio in hundredths of a basis point). The
        ratio has no upper bound.

    Raises:
        InvalidArgument: If the vault mints do not match the position mints
    """
    if position.loan_shares_a == 0 and position.loan_shares_b == 0:
        return True, 0

    if vault_a.mint != position.mint_a or vault_b.mint != position.mint_b:
        raise InvalidArgument("Vault mints do not match the position mints")

    total, debt = compute_total_and_debt(position, sqrt_price, vault_a, vault_b)

    if total == 0:
        return True, 0

    threshold_amount = ((S(total) * market.liquidation_threshold) // HUNDRED_PERCENT).value
    healthy = debt <= threshold_amount
    ratio = ((S(debt) * HUNDRED_PERCENT) // total).value

    if not healthy:
        logger.info(
            "position_unhealthy",
            total=total,
            debt=debt,
            ratio=ratio,
            liquidation_threshold=market.liquidation_threshold,
        )
    return healthy, ratio


def get_max_leverage(market: Market) -> Fixed128:
    """Market max leverage as a Fixed128 multiplier."""
    return Fixed128.from_num(market.max_leverage) / Fixed128.from_num(LEVERAGE_ONE)


def get_liquidation_price(
    position_token: int, amount: int, debt: int, liquidation_threshold: int
) -> float:
    """Price at which a single-token position reaches the liquidation threshold.

    Informational only. Returns 0.0 when there is no amount or no debt.

    Raises:
        InvalidArgument: If the threshold is outside (0, HUNDRED_PERCENT) or the
            position token is unknown
    """
    if not 0 < liquidation_threshold < HUNDRED_PERCENT:
        raise InvalidArgument(
            f"Liquidation threshold {liquidation_threshold} outside (0, {HUNDRED_PERCENT})"
        )
    if position_token not in (TOKEN_A, TOKEN_B):
        raise InvalidArgument(f"Unknown position token {position_token}")

    if debt == 0 or amount == 0:
        return 0.0

    threshold = liquidation_threshold / HUNDRED_PERCENT
    if position_token == TOKEN_A:
        return debt / (amount * threshold)
    return (amount * threshold) / debt
