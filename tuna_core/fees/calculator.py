"""Protocol and swap fee calculator.

Uses the rounding-aware multiply-divide so that every fee matches the
amount the on-chain program recomputes:
- apply_fee:               amount * (HP - rate) / HP
- reverse_apply_fee:       amount * HP / (HP - rate)
- blended_fee:             (collateral * rate_on_collateral + borrow * rate) / HP
- apply_swap_fee:          amount * (SD - fee_rate) / SD
- reverse_apply_swap_fee:  amount * SD / (SD - fee_rate)

where HP is FeeConfig.hundred_percent and SD is
FeeConfig.swap_fee_denominator. Overflow never degrades into a partial or
clamped fee; it is logged and re-raised.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from tuna_core.constants import TOKEN_A, TOKEN_B, U16_MAX
from tuna_core.errors import InvalidArgument, TunaMathError
from tuna_core.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from tuna_core.fees.result import TokenPair
from tuna_core.math.full_math import try_mul_div
from tuna_core.safe_int import S, require_uint

logger = structlog.get_logger()


class FeeCalculator(Protocol):
    """Protocol for fee calculation.

    Protocol fee rates are integers in hundredths of a basis point, pool
    swap fee rates are u16 against the swap fee denominator. Amounts are u64.
    """

    def apply_fee(self, amount: int, rate: int, round_up: bool) -> int:
        """Return the amount left after deducting a fee of `rate`."""
        ...

    def reverse_apply_fee(self, amount: int, rate: int, round_up: bool) -> int:
        """Return the gross amount that leaves `amount` after the fee."""
        ...

    def blended_fee(
        self, collateral: int, borrow: int, rate_on_collateral: int, rate: int
    ) -> int:
        """Return the fee charged on collateral plus borrowed funds."""
        ...

    def apply_swap_fee(self, amount: int, fee_rate: int, round_up: bool) -> int:
        """Return the swap input left after the pool fee."""
        ...

    def reverse_apply_swap_fee(self, amount: int, fee_rate: int, round_up: bool) -> int:
        """Return the swap input needed to leave `amount` after the pool fee."""
        ...

    def spot_position_protocol_fee(
        self,
        collateral_token: int,
        borrowed_token: int,
        collateral: int,
        borrow: int,
        rate_on_collateral: int,
        rate: int,
    ) -> TokenPair:
        """Return the blended protocol fee split per pool token."""
        ...


class DefaultFeeCalculator:
    """Default implementation of protocol fee calculation.

    Attributes:
        config: Fee configuration settings
    """

    def __init__(self, config: FeeConfig | None = None):
        self.config = config or DEFAULT_FEE_CONFIG

    def _validate_rate(self, rate: int, *, inclusive: bool = False) -> int:
        hundred_percent = self.config.hundred_percent
        if not isinstance(rate, int) or isinstance(rate, bool):
            raise InvalidArgument(f"Fee rate must be int, got {type(rate).__name__}")
        if rate < 0 or rate > hundred_percent or (rate == hundred_percent and not inclusive):
            bound = "]" if inclusive else ")"
            raise InvalidArgument(f"Fee rate {rate} outside [0, {hundred_percent}{bound}")
        return rate

    def _validate_swap_fee_rate(self, fee_rate: int) -> int:
        limit = min(U16_MAX + 1, self.config.swap_fee_denominator)
        if not isinstance(fee_rate, int) or isinstance(fee_rate, bool):
            raise InvalidArgument(f"Swap fee rate must be int, got {type(fee_rate).__name__}")
        if not 0 <= fee_rate < limit:
            raise InvalidArgument(f"Swap fee rate {fee_rate} outside [0, {limit})")
        return fee_rate

    def apply_fee(self, amount: int, rate: int, round_up: bool) -> int:
        """Deduct a fee: amount * (HP - rate) / HP.

        Args:
            amount: Gross amount (u64)
            rate: Fee rate in [0, HP)
            round_up: Round the net amount up instead of down

        Raises:
            InvalidArgument: If rate is outside [0, HP)
            ArithmeticOverflow: If amount is not a u64
        """
        hundred_percent = self.config.hundred_percent
        rate = self._validate_rate(rate)
        try:
            return try_mul_div(amount, hundred_percent - rate, hundred_percent, round_up)
        except TunaMathError:
            logger.warning("apply_fee_failed", amount=amount, rate=rate, round_up=round_up)
            raise

    def reverse_apply_fee(self, amount: int, rate: int, round_up: bool) -> int:
        """Invert apply_fee: amount * HP / (HP - rate).

        Raises:
            InvalidArgument: If rate is outside [0, HP)
            ArithmeticOverflow: If amount is not a u64 or the result exceeds u64
        """
        hundred_percent = self.config.hundred_percent
        rate = self._validate_rate(rate)
        try:
            return try_mul_div(amount, hundred_percent, hundred_percent - rate, round_up)
        except TunaMathError:
            logger.warning("reverse_apply_fee_failed", amount=amount, rate=rate, round_up=round_up)
            raise

    def blended_fee(
        self, collateral: int, borrow: int, rate_on_collateral: int, rate: int
    ) -> int:
        """Fee on collateral and borrowed funds, truncated.

        Both products are summed in one widened intermediate before the
        single division.

        Raises:
            InvalidArgument: If a rate is outside [0, HP]
            ArithmeticOverflow: If an amount is not a u64 or the fee exceeds u64
        """
        require_uint(collateral, 64, "collateral")
        require_uint(borrow, 64, "borrow")
        rate_on_collateral = self._validate_rate(rate_on_collateral, inclusive=True)
        rate = self._validate_rate(rate, inclusive=True)

        fee = (S(collateral) * rate_on_collateral + S(borrow) * rate) // self.config.hundred_percent
        if not fee.is_u64():
            logger.warning(
                "blended_fee_overflow",
                collateral=collateral,
                borrow=borrow,
                fee_value=str(fee.value),
            )
        return fee.to_u64()

    def apply_swap_fee(self, amount: int, fee_rate: int, round_up: bool) -> int:
        """Deduct a pool swap fee: amount * (SD - fee_rate) / SD.

        Raises:
            InvalidArgument: If fee_rate is not a u16 below SD
            ArithmeticOverflow: If amount is not a u64
        """
        denominator = self.config.swap_fee_denominator
        fee_rate = self._validate_swap_fee_rate(fee_rate)
        try:
            return try_mul_div(amount, denominator - fee_rate, denominator, round_up)
        except TunaMathError:
            logger.warning(
                "apply_swap_fee_failed", amount=amount, fee_rate=fee_rate, round_up=round_up
            )
            raise

    def reverse_apply_swap_fee(self, amount: int, fee_rate: int, round_up: bool) -> int:
        """Invert apply_swap_fee: amount * SD / (SD - fee_rate).

        Raises:
            InvalidArgument: If fee_rate is not a u16 below SD
            ArithmeticOverflow: If amount is not a u64 or the result exceeds u64
        """
        denominator = self.config.swap_fee_denominator
        fee_rate = self._validate_swap_fee_rate(fee_rate)
        try:
            return try_mul_div(amount, denominator, denominator - fee_rate, round_up)
        except TunaMathError:
            logger.warning(
                "reverse_apply_swap_fee_failed",
                amount=amount,
                fee_rate=fee_rate,
                round_up=round_up,
            )
            raise

    def spot_position_protocol_fee(
        self,
        collateral_token: int,
        borrowed_token: int,
        collateral: int,
        borrow: int,
        rate_on_collateral: int,
        rate: int,
    ) -> TokenPair:
        """Blended protocol fee of a spot position, charged per token.

        Collateral and borrowed funds are attributed to the token they are
        held in, then each token's fee is a separate blended_fee.

        Args:
            collateral_token: TOKEN_A or TOKEN_B
            borrowed_token: TOKEN_A or TOKEN_B

        Raises:
            InvalidArgument: If a token selector is unknown or a rate is
                outside [0, HP]
            ArithmeticOverflow: If an amount is not a u64
        """
        for token in (collateral_token, borrowed_token):
            if token not in (TOKEN_A, TOKEN_B):
                raise InvalidArgument(f"Unknown position token {token}")

        collateral_a = collateral if collateral_token == TOKEN_A else 0
        collateral_b = collateral if collateral_token == TOKEN_B else 0
        borrow_a = borrow if borrowed_token == TOKEN_A else 0
        borrow_b = borrow if borrowed_token == TOKEN_B else 0

        return TokenPair(
            a=self.blended_fee(collateral_a, borrow_a, rate_on_collateral, rate),
            b=self.blended_fee(collateral_b, borrow_b, rate_on_collateral, rate),
        )


# Default calculator instance
DEFAULT_FEE_CALCULATOR = DefaultFeeCalculator()


def apply_fee(amount: int, rate: int, round_up: bool) -> int:
    return DEFAULT_FEE_CALCULATOR.apply_fee(amount, rate, round_up)


def reverse_apply_fee(amount: int, rate: int, round_up: bool) -> int:
    return DEFAULT_FEE_CALCULATOR.reverse_apply_fee(amount, rate, round_up)


def blended_fee(collateral: int, borrow: int, rate_on_collateral: int, rate: int) -> int:
    return DEFAULT_FEE_CALCULATOR.blended_fee(collateral, borrow, rate_on_collateral, rate)


def apply_swap_fee(amount: int, fee_rate: int, round_up: bool) -> int:
    return DEFAULT_FEE_CALCULATOR.apply_swap_fee(amount, fee_rate, round_up)


def reverse_apply_swap_fee(amount: int, fee_rate: int, round_up: bool) -> int:
    return DEFAULT_FEE_CALCULATOR.reverse_apply_swap_fee(amount, fee_rate, round_up)


def spot_position_protocol_fee(
    collateral_token: int,
    borrowed_token: int,
    collateral: int,
    borrow: int,
    rate_on_collateral: int,
    rate: int,
) -> TokenPair:
    return DEFAULT_FEE_CALCULATOR.spot_position_protocol_fee(
        collateral_token, borrowed_token, collateral, borrow, rate_on_collateral, rate
    )
