"""DefiTuna lending core - deterministic fixed-point arithmetic."""

from tuna_core.errors import (
    ArithmeticOverflow,
    ArithmeticUnderflow,
    DivisionByZero,
    InvalidArgument,
    TunaMathError,
)
from tuna_core.fees import apply_fee, blended_fee, reverse_apply_fee
from tuna_core.math import (
    U64F64,
    Fixed128,
    Rounding,
    mul_div_64,
    sample,
    sqrt_price_x64_to_price_fixed,
    sqrt_price_x64_to_price_x64,
)

__version__ = "0.1.0"
__all__ = [
    "ArithmeticOverflow",
    "ArithmeticUnderflow",
    "DivisionByZero",
    "InvalidArgument",
    "TunaMathError",
    "Fixed128",
    "U64F64",
    "Rounding",
    "mul_div_64",
    "sample",
    "sqrt_price_x64_to_price_fixed",
    "sqrt_price_x64_to_price_x64",
    "apply_fee",
    "reverse_apply_fee",
    "blended_fee",
    "__version__",
]
