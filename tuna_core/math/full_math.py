"""Wide multiplication and rounding-aware multiply-divide.

These routines reproduce the integer arithmetic of the on-chain program:
operands are unsigned integers of a fixed width, products are computed in a
double-width intermediate, and the quotient is narrowed back to the operand
width. Nothing wraps; every lossy step follows an explicit Rounding mode and
every out-of-range result raises.
"""

from __future__ import annotations

from enum import Enum

from tuna_core.errors import ArithmeticOverflow, ArithmeticUnderflow, DivisionByZero
from tuna_core.safe_int import S, require_uint

__all__ = [
    "Rounding",
    "mul_u256",
    "mul_div_64",
    "mul_div_128",
    "try_mul_div",
]


class Rounding(Enum):
    """Rounding direction for a division that may not be exact."""

    UP = "up"
    DOWN = "down"


def mul_u256(x: int, y: int) -> int:
    """Multiply two u128 values into an exact 256-bit product.

    Raises:
        ArithmeticOverflow: If an operand is not a u128
    """
    require_uint(x, 128, "x")
    require_uint(y, 128, "y")
    return x * y


def _mul_div(x: int, y: int, d: int, rounding: Rounding, bits: int) -> int:
    wide = 2 * bits
    product = S(x) * y

    if rounding is Rounding.UP:
        bias = S(d).checked_sub(1)
        if bias is None:
            raise ArithmeticUnderflow(f"Round-up divisor underflow: {d} - 1")
        numerator = product + bias
        if numerator.value >> wide:
            raise ArithmeticOverflow(f"Numerator exceeds u{wide}: {numerator}")
    elif rounding is Rounding.DOWN:
        numerator = product
    else:
        raise TypeError(f"rounding must be a Rounding, got {rounding!r}")

    try:
        quotient = numerator // d
    except DivisionByZero:
        raise DivisionByZero(f"mul_div by zero: {x} * {y} / 0") from None
    return quotient.to_uint(bits)


def mul_div_64(x: int, y: int, d: int, rounding: Rounding) -> int:
    """Compute x * y / d for u64 operands via a 128-bit intermediate.

    Args:
        x: Multiplicand (u64)
        y: Multiplier (u64)
        d: Divisor (u64)
        rounding: Rounding.DOWN truncates; Rounding.UP adds d - 1 before dividing

    Returns:
        The quotient as a u64

    Raises:
        ArithmeticUnderflow: If d == 0 with Rounding.UP
        DivisionByZero: If d == 0 with Rounding.DOWN
        ArithmeticOverflow: If an operand is not a u64 or the quotient exceeds u64

    Examples:
        mul_div_64(10, 10, 3, Rounding.DOWN) == 33
        mul_div_64(10, 10, 3, Rounding.UP) == 34
        mul_div_64(10, 10, 4, Rounding.UP) == 25
    """
    require_uint(x, 64, "x")
    require_uint(y, 64, "y")
    require_uint(d, 64, "d")
    return _mul_div(x, y, d, rounding, 64)


def mul_div_128(x: int, y: int, d: int, rounding: Rounding) -> int:
    """Compute x * y / d for u128 operands via a 256-bit intermediate.

    Same contract as mul_div_64 at twice the width.
    """
    require_uint(x, 128, "x")
    require_uint(y, 128, "y")
    require_uint(d, 128, "d")
    return _mul_div(x, y, d, rounding, 128)


def try_mul_div(amount: int, numerator: int, denominator: int, round_up: bool) -> int:
    """Scale a u64 amount by numerator / denominator, narrowing back to u64.

    The factors are u128, the product is formed in 256 bits.

    Raises:
        ArithmeticUnderflow: If denominator == 0 and round_up
        DivisionByZero: If denominator == 0 and not round_up
        ArithmeticOverflow: If the result does not fit in u64
    """
    require_uint(amount, 64, "amount")
    rounding = Rounding.UP if round_up else Rounding.DOWN
    return S(mul_div_128(amount, numerator, denominator, rounding)).to_u64()
