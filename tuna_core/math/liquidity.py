"""Token amounts of a concentrated-liquidity position.

Standard Q64.64 sqrt-price formulas:

    delta_a = liquidity * (sqrt_upper - sqrt_lower) / (sqrt_upper * sqrt_lower)
    delta_b = liquidity * (sqrt_upper - sqrt_lower)

Intermediates are formed in 256 bits and narrowed to u64 token amounts,
raising ArithmeticOverflow when the amount does not fit.
"""

from __future__ import annotations

from tuna_core.errors import ArithmeticOverflow, ZeroPriceRange
from tuna_core.math.full_math import mul_u256
from tuna_core.safe_int import S, require_uint

__all__ = [
    "increasing_price_order",
    "get_amount_delta_a",
    "get_amount_delta_b",
    "get_amounts_for_liquidity",
    "get_liquidity_for_amounts",
]

Q64_RESOLUTION = 64
Q64_MASK = (1 << Q64_RESOLUTION) - 1


def increasing_price_order(sqrt_price_0: int, sqrt_price_1: int) -> tuple[int, int]:
    if sqrt_price_0 > sqrt_price_1:
        return sqrt_price_1, sqrt_price_0
    return sqrt_price_0, sqrt_price_1


def get_amount_delta_a(sqrt_price_0: int, sqrt_price_1: int, liquidity: int) -> int:
    """Token A amount for `liquidity` between two sqrt prices, rounded down.

    Raises:
        ArithmeticOverflow: If a sqrt price is zero or the amount exceeds u64
    """
    lower, upper = increasing_price_order(sqrt_price_0, sqrt_price_1)

    numerator = S(mul_u256(liquidity, upper - lower)).checked_shl(Q64_RESOLUTION)
    if numerator is None:
        raise ArithmeticOverflow(f"Token A numerator overflow for liquidity {liquidity}")

    denominator = mul_u256(upper, lower)
    if denominator == 0:
        raise ArithmeticOverflow("Token A denominator is zero")

    return (numerator // denominator).to_u64()


def get_amount_delta_b(
    sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool = False
) -> int:
    """Token B amount for `liquidity` between two sqrt prices.

    Raises:
        ArithmeticOverflow: If the product exceeds u128 or the amount exceeds u64
    """
    lower, upper = increasing_price_order(sqrt_price_0, sqrt_price_1)
    require_uint(liquidity, 128, "liquidity")

    product = S(liquidity) * (upper - lower)
    if product == 0:
        return 0
    if not product.is_u128():
        raise ArithmeticOverflow(f"Token B product overflow for liquidity {liquidity}")

    result = product >> Q64_RESOLUTION
    if round_up and (product & Q64_MASK) > 0:
        result = result + 1
    return result.to_u64()


def get_amounts_for_liquidity(
    sqrt_price: int, sqrt_price_a_x64: int, sqrt_price_b_x64: int, liquidity: int
) -> tuple[int, int]:
    """Token A and B amounts held by `liquidity` at the current sqrt price.

    Below the range the position is all token A, above it all token B.

    Raises:
        ZeroPriceRange: If both range bounds are equal
    """
    if sqrt_price_a_x64 == sqrt_price_b_x64:
        raise ZeroPriceRange(f"Empty price range at sqrt price {sqrt_price_a_x64}")

    lower, upper = increasing_price_order(sqrt_price_a_x64, sqrt_price_b_x64)

    if sqrt_price <= lower:
        return get_amount_delta_a(lower, upper, liquidity), 0
    if sqrt_price < upper:
        return (
            get_amount_delta_a(sqrt_price, upper, liquidity),
            get_amount_delta_b(lower, sqrt_price, liquidity),
        )
    return 0, get_amount_delta_b(lower, upper, liquidity)


def _liquidity_for_amount_a(amount: int, lower: int, upper: int) -> int:
    intermediate = S(mul_u256(upper, lower)) >> Q64_RESOLUTION
    return ((intermediate * amount) // (upper - lower)).to_u128()


def _liquidity_for_amount_b(amount: int, lower: int, upper: int) -> int:
    return ((S(amount) << Q64_RESOLUTION) // (upper - lower)).to_u128()


def get_liquidity_for_amounts(
    sqrt_price: int, sqrt_price_a_x64: int, sqrt_price_b_x64: int, amount_a: int, amount_b: int
) -> int:
    """Largest liquidity that the given token amounts can provide in the range.

    Raises:
        ZeroPriceRange: If both range bounds are equal
        ArithmeticOverflow: If the liquidity exceeds u128
    """
    if sqrt_price_a_x64 == sqrt_price_b_x64:
        raise ZeroPriceRange(f"Empty price range at sqrt price {sqrt_price_a_x64}")
    require_uint(amount_a, 64, "amount_a")
    require_uint(amount_b, 64, "amount_b")

    lower, upper = increasing_price_order(sqrt_price_a_x64, sqrt_price_b_x64)

    if sqrt_price <= lower:
        return _liquidity_for_amount_a(amount_a, lower, upper)
    if sqrt_price < upper:
        liquidity_a = _liquidity_for_amount_a(amount_a, sqrt_price, upper)
        liquidity_b = _liquidity_for_amount_b(amount_b, lower, sqrt_price)
        return min(liquidity_a, liquidity_b)
    return _liquidity_for_amount_b(amount_b, lower, upper)
