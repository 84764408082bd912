"""Unsigned 128-bit binary fixed-point numbers.

A FixedPoint value is an unsigned 128-bit bit pattern split into integer and
fractional bits at a boundary fixed per subclass:

- Fixed128: 68 integer bits / 60 fractional bits. Ratios (utilization, fee
  rates, leverage, borrow multipliers) and prices in the lending engine.
- U64F64: 64 integer bits / 64 fractional bits. Prices squared from a Q64.64
  sqrt price.

Multiplication and division truncate toward zero, exactly like the on-chain
fixed-point library. Operators raise on overflow; the checked_* methods
return None instead. Values of different fractional widths never mix
implicitly: use rescale().
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from tuna_core.constants import HUNDRED_PERCENT
from tuna_core.errors import ArithmeticOverflow, ArithmeticUnderflow, DivisionByZero
from tuna_core.safe_int import S, require_uint

__all__ = [
    "FixedPoint",
    "Fixed128",
    "U64F64",
    "bps_to_fraction",
    "DISPLAY_DIGITS",
]

F = TypeVar("F", bound="FixedPoint")

# Number of fractional decimal digits produced by to_display()
DISPLAY_DIGITS = 4
_DISPLAY_SCALE = 10**DISPLAY_DIGITS


class FixedPoint:
    """Unsigned fixed-point number stored as raw bits.

    Subclasses set INT_BITS and FRAC_BITS; the derived constants
    (ONE_BITS, MAX_BITS, FRAC_MASK, ROUND_COMP) are computed when the
    subclass is created.

    Example: in Fixed128, 1.5 is stored as 3 << 59
    """

    TOTAL_BITS: ClassVar[int] = 128
    INT_BITS: ClassVar[int]
    FRAC_BITS: ClassVar[int]

    ONE_BITS: ClassVar[int]
    MAX_BITS: ClassVar[int]
    FRAC_MASK: ClassVar[int]
    # Half of one display unit (1e-4), in fractional-bit units
    ROUND_COMP: ClassVar[int]

    __slots__ = ("_bits",)
    _bits: int

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.INT_BITS + cls.FRAC_BITS != cls.TOTAL_BITS:
            raise TypeError(f"{cls.__name__}: integer and fractional bits must sum to {cls.TOTAL_BITS}")
        cls.ONE_BITS = 1 << cls.FRAC_BITS
        cls.MAX_BITS = (1 << cls.TOTAL_BITS) - 1
        cls.FRAC_MASK = cls.ONE_BITS - 1
        cls.ROUND_COMP = cls.ONE_BITS // (_DISPLAY_SCALE * 2)

    def __init__(self, bits: int) -> None:
        """Create from the raw bit pattern.

        Raises:
            ArithmeticOverflow: If bits is not an unsigned 128-bit integer
        """
        object.__setattr__(self, "_bits", require_uint(bits, self.TOTAL_BITS, "bits"))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def bits(self) -> int:
        """The raw unsigned bit pattern."""
        return self._bits

    # --- Construction ---

    @classmethod
    def from_bits(cls: type[F], bits: int) -> F:
        return cls(bits)

    @classmethod
    def zero(cls: type[F]) -> F:
        return cls(0)

    @classmethod
    def one(cls: type[F]) -> F:
        return cls(cls.ONE_BITS)

    @classmethod
    def max_value(cls: type[F]) -> F:
        return cls(cls.MAX_BITS)

    @classmethod
    def from_num(cls: type[F], n: int) -> F:
        """Create from an unsigned integer.

        Raises:
            ArithmeticOverflow: If n does not fit in the integer bits
        """
        require_uint(n, cls.INT_BITS, "n")
        return cls(n << cls.FRAC_BITS)

    @classmethod
    def from_ratio(cls: type[F], numerator: int, denominator: int) -> F:
        """Create numerator / denominator, truncated to the fractional precision.

        Raises:
            DivisionByZero: If denominator is zero
            ArithmeticOverflow: If the ratio does not fit
        """
        quotient = (S(numerator) << cls.FRAC_BITS) // denominator
        return cls(quotient.to_uint(cls.TOTAL_BITS))

    @classmethod
    def from_bps(cls: type[F], bps: int) -> F:
        """Convert hundredths of a basis point (1_000_000 = 1.0) to a fraction.

        The quotient is truncated, so the result is below the exact ratio by
        less than one unit in the last fractional place.
        """
        return cls.from_num(bps).div_int(HUNDRED_PERCENT)

    # --- Conversion ---

    def to_num(self) -> int:
        """Integer part (truncating)."""
        return self._bits >> self.FRAC_BITS

    def to_float(self) -> float:
        """Nearest float; informational only."""
        return self._bits / self.ONE_BITS

    def round(self: F) -> F:
        """Round to the nearest integer, ties away from zero.

        Raises:
            ArithmeticOverflow: If rounding up leaves the representable range
        """
        rounded = ((self._bits + (self.ONE_BITS >> 1)) >> self.FRAC_BITS) << self.FRAC_BITS
        if rounded > self.MAX_BITS:
            raise ArithmeticOverflow(f"{self!r} rounds outside of {type(self).__name__}")
        return type(self)(rounded)

    def floor(self: F) -> F:
        return type(self)(self._bits & ~self.FRAC_MASK)

    def rescale(self, target: type[F]) -> F:
        """Convert to another fixed-point layout.

        Gaining fractional bits is exact; losing them truncates.

        Raises:
            ArithmeticOverflow: If the integer part does not fit in the target
        """
        shift = target.FRAC_BITS - self.FRAC_BITS
        bits = self._bits << shift if shift >= 0 else self._bits >> -shift
        return target(S(bits).to_uint(target.TOTAL_BITS))

    def to_bps(self, width: int = 32) -> int:
        """Convert to hundredths of a basis point, rounded to nearest.

        Args:
            width: Bit width of the destination unsigned integer

        Raises:
            ArithmeticOverflow: If the scaled value does not fit in `width` bits
        """
        scaled = self.mul_int(HUNDRED_PERCENT).round().to_num()
        return S(scaled).to_uint(width)

    def to_display(self) -> str:
        """Render with exactly four fractional digits.

        Half a display unit (itself truncated to the fractional precision) is
        added to the raw bits before the integer and fractional parts are
        split, then the fraction is scaled to 1e4 using two truncating
        half-width shifts so the intermediate stays within 64 bits. Values
        exactly on a half digit, such as from_bps(123_450), can therefore
        render the lower digit ("0.1234").
        """
        bits = self._bits + self.ROUND_COMP
        integer = bits >> self.FRAC_BITS
        half = self.FRAC_BITS // 2
        fraction = ((bits & self.FRAC_MASK) >> half) * _DISPLAY_SCALE >> (self.FRAC_BITS - half)
        return f"{integer}.{fraction:0{DISPLAY_DIGITS}d}"

    # --- Checked arithmetic ---

    def _same_type(self: F, other: object) -> F:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}; "
                f"rescale explicitly"
            )
        return other  # type: ignore[return-value]

    def checked_add(self: F, other: F) -> F | None:
        bits = self._bits + self._same_type(other)._bits
        if bits > self.MAX_BITS:
            return None
        return type(self)(bits)

    def checked_sub(self: F, other: F) -> F | None:
        bits = self._bits - self._same_type(other)._bits
        if bits < 0:
            return None
        return type(self)(bits)

    def checked_mul(self: F, other: F) -> F | None:
        bits = (self._bits * self._same_type(other)._bits) >> self.FRAC_BITS
        if bits > self.MAX_BITS:
            return None
        return type(self)(bits)

    def checked_div(self: F, other: F) -> F | None:
        divisor = self._same_type(other)._bits
        if divisor == 0:
            return None
        bits = (self._bits << self.FRAC_BITS) // divisor
        if bits > self.MAX_BITS:
            return None
        return type(self)(bits)

    def mul_int(self: F, n: int) -> F:
        """Multiply by an unsigned integer.

        Raises:
            ArithmeticOverflow: If the product does not fit
        """
        bits = S(self._bits) * require_uint(n, self.TOTAL_BITS, "n")
        if bits > self.MAX_BITS:
            raise ArithmeticOverflow(f"{self!r} * {n} overflows {type(self).__name__}")
        return type(self)(bits.value)

    def div_int(self: F, n: int) -> F:
        """Divide by an unsigned integer, truncating.

        Raises:
            DivisionByZero: If n is zero
        """
        return type(self)((S(self._bits) // require_uint(n, self.TOTAL_BITS, "n")).value)

    # --- Operators (raising) ---

    def __add__(self: F, other: F) -> F:
        result = self.checked_add(other)
        if result is None:
            raise ArithmeticOverflow(f"{self!r} + {other!r} overflows {type(self).__name__}")
        return result

    def __sub__(self: F, other: F) -> F:
        result = self.checked_sub(other)
        if result is None:
            raise ArithmeticUnderflow(f"{self!r} - {other!r} is negative")
        return result

    def __mul__(self: F, other: F) -> F:
        result = self.checked_mul(other)
        if result is None:
            raise ArithmeticOverflow(f"{self!r} * {other!r} overflows {type(self).__name__}")
        return result

    def __truediv__(self: F, other: F) -> F:
        result = self.checked_div(other)
        if result is None:
            if other._bits == 0:
                raise DivisionByZero(f"{self!r} / 0")
            raise ArithmeticOverflow(f"{self!r} / {other!r} overflows {type(self).__name__}")
        return result

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bits == other._bits  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._bits))

    def __lt__(self: F, other: F) -> bool:
        return self._bits < self._same_type(other)._bits

    def __le__(self: F, other: F) -> bool:
        return self._bits <= self._same_type(other)._bits

    def __gt__(self: F, other: F) -> bool:
        return self._bits > self._same_type(other)._bits

    def __ge__(self: F, other: F) -> bool:
        return self._bits >= self._same_type(other)._bits

    def __bool__(self) -> bool:
        return self._bits != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_bits({self._bits})"

    def __str__(self) -> str:
        return self.to_display()


class Fixed128(FixedPoint):
    """U68F60: the lending engine's ratio and price type."""

    INT_BITS = 68
    FRAC_BITS = 60

    __slots__ = ()


class U64F64(FixedPoint):
    """U64F64: a Q64.64 price."""

    INT_BITS = 64
    FRAC_BITS = 64

    __slots__ = ()


def bps_to_fraction(bps: int) -> Fixed128:
    """Convert a rate in hundredths of a basis point to a Fixed128 fraction."""
    if bps == HUNDRED_PERCENT:
        return Fixed128.one()
    return Fixed128.from_bps(bps)
