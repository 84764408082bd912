"""Conversion of Q64.64 square-root prices into linear prices.

Concentrated-liquidity pools store sqrt(price) as a Q64.64 unsigned integer.
Squaring it yields the price of token A in token B units. Two output
layouts exist: Fixed128 (more integer range) and U64F64 (more fractional
precision, used to value positions).
"""

from tuna_core.errors import ArithmeticOverflow
from tuna_core.math.fixed_point import U64F64, Fixed128
from tuna_core.safe_int import require_uint

__all__ = [
    "SQRT_PRICE_FRAC_BITS",
    "sqrt_price_x64_to_price_fixed",
    "sqrt_price_x64_to_price_x64",
    "sqrt_price_x64_to_price_float",
]

SQRT_PRICE_FRAC_BITS = 64


def sqrt_price_x64_to_price_fixed(sqrt_price_x64: int) -> Fixed128:
    """Square a Q64.64 sqrt price into a Fixed128 price.

    The sqrt price is first shifted right to Fixed128's 60 fractional bits.

    Raises:
        ArithmeticOverflow: If the input is not a u128 or the square overflows
    """
    require_uint(sqrt_price_x64, 128, "sqrt_price_x64")
    sqrt_price = Fixed128.from_bits(sqrt_price_x64 >> (SQRT_PRICE_FRAC_BITS - Fixed128.FRAC_BITS))
    price = sqrt_price.checked_mul(sqrt_price)
    if price is None:
        raise ArithmeticOverflow(f"Price overflow for sqrt price {sqrt_price_x64}")
    return price


def sqrt_price_x64_to_price_x64(sqrt_price_x64: int) -> U64F64:
    """Reinterpret a Q64.64 sqrt price as U64F64 and square it.

    Raises:
        ArithmeticOverflow: If the input is not a u128 or the square overflows
    """
    require_uint(sqrt_price_x64, 128, "sqrt_price_x64")
    sqrt_price = U64F64.from_bits(sqrt_price_x64)
    price = sqrt_price.checked_mul(sqrt_price)
    if price is None:
        raise ArithmeticOverflow(f"Price overflow for sqrt price {sqrt_price_x64}")
    return price


def sqrt_price_x64_to_price_float(sqrt_price_x64: int, decimals_a: int, decimals_b: int) -> float:
    """Human-readable price of token A in token B, adjusted for token decimals.

    Informational only; amounts sent to the program never go through floats.
    """
    require_uint(sqrt_price_x64, 128, "sqrt_price_x64")
    sqrt_price = sqrt_price_x64 / 2**SQRT_PRICE_FRAC_BITS
    return sqrt_price * sqrt_price * 10 ** (decimals_a - decimals_b)
