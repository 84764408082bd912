"""Error classes for the lending math core.

Every fallible routine raises one of these instead of wrapping, clamping,
or returning a default amount. All of them are terminal for the
computation in progress.
"""


class TunaMathError(ArithmeticError):
    """Base error for lending math operations."""

    pass


class ArithmeticOverflow(TunaMathError):
    """A product, sum, or narrowing conversion exceeds the target type."""

    pass


class ArithmeticUnderflow(TunaMathError):
    """A subtraction would go negative in an unsigned domain."""

    pass


class DivisionByZero(ArithmeticOverflow):
    """Division or modulo by zero."""

    pass


class InvalidArgument(TunaMathError, ValueError):
    """An input is outside the range accepted by the protocol."""

    pass


class LeverageOutOfRange(TunaMathError):
    """Position debt is greater than or equal to its total value."""

    pass


class ZeroPriceRange(TunaMathError):
    """Lower and upper sqrt prices of a range are equal."""

    pass


__all__ = [
    "TunaMathError",
    "ArithmeticOverflow",
    "ArithmeticUnderflow",
    "DivisionByZero",
    "InvalidArgument",
    "LeverageOutOfRange",
    "ZeroPriceRange",
]
