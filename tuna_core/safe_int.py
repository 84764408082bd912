"""Safe integer wrapper for arithmetic on token amounts and raw fixed-point bits.

This module provides SafeInt, a lightweight wrapper that makes arithmetic
operations safe by default:
- Division by zero raises DivisionByZero
- Subtraction underflow raises ArithmeticUnderflow
- u64/u128 overflow is caught on narrowing conversion

Python integers never wrap, so intermediates are exact; the width of the
on-chain type is enforced only where a value crosses back into it.

Usage pattern:
    from tuna_core.safe_int import S

    def shares_for(funds: int, total_shares: int, total_funds: int) -> int:
        # Wrap at entry
        sf, ss, st = S(funds), S(total_shares), S(total_funds)

        # Natural arithmetic - automatically safe
        result = (sf * ss) // st  # Raises if st == 0

        # Narrow at exit
        return result.to_u64()
"""

from __future__ import annotations

from tuna_core.constants import U64_MAX, U128_MAX
from tuna_core.errors import ArithmeticOverflow, ArithmeticUnderflow, DivisionByZero


class SafeInt:
    """Integer with safe arithmetic operations.

    Wraps an integer and provides arithmetic operators that raise
    descriptive errors instead of producing invalid results:
    - Division by zero raises DivisionByZero
    - Negative results from subtraction raise ArithmeticUnderflow
    - Values exceeding the target width raise ArithmeticOverflow on to_u64()
      and to_u128()

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt (bool is rejected)
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        other_val = _extract_value(other)
        return SafeInt(self._value + other_val)

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            ArithmeticUnderflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise ArithmeticUnderflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise ArithmeticUnderflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        other_val = _extract_value(other)
        return SafeInt(self._value * other_val)

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division (truncating for non-negative operands).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __lshift__(self, shift: int) -> SafeInt:
        return SafeInt(self._value << shift)

    def __rshift__(self, shift: int) -> SafeInt:
        return SafeInt(self._value >> shift)

    def __and__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value & _extract_value(other))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def checked_sub(self, other: SafeInt | int) -> SafeInt | None:
        """Subtract, returning None on underflow instead of raising."""
        result = self._value - _extract_value(other)
        if result < 0:
            return None
        return SafeInt(result)

    def checked_shl(self, shift: int, bits: int = 256) -> SafeInt | None:
        """Shift left, returning None if any set bit would leave a `bits`-wide word.

        Zero can be shifted by any amount.
        """
        if self._value == 0:
            return SafeInt(0)
        if shift >= bits:
            return None
        result = self._value << shift
        if result >> bits:
            return None
        return SafeInt(result)

    def to_uint(self, bits: int) -> int:
        """Convert to int, validating it fits in an unsigned `bits`-wide integer.

        Raises:
            ArithmeticOverflow: If value is negative or does not fit
        """
        if self._value < 0:
            raise ArithmeticOverflow(f"Negative value cannot be u{bits}: {self._value}")
        if self._value >> bits:
            raise ArithmeticOverflow(f"Value exceeds u{bits} max: {self._value}")
        return self._value

    def to_u64(self) -> int:
        return self.to_uint(64)

    def to_u128(self) -> int:
        return self.to_uint(128)

    def is_u64(self) -> bool:
        """Check if value fits in u64 without raising."""
        return 0 <= self._value <= U64_MAX

    def is_u128(self) -> bool:
        return 0 <= self._value <= U128_MAX


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


def require_uint(value: int, bits: int, name: str = "value") -> int:
    """Validate that a plain int argument is an unsigned `bits`-wide integer.

    Raises:
        TypeError: If value is not an int
        ArithmeticOverflow: If value is negative or too wide
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0 or value >> bits:
        raise ArithmeticOverflow(f"{name} out of u{bits} range: {value}")
    return value


# Convenience alias for concise code
S = SafeInt
