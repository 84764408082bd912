"""Fixed-point arithmetic engine.

This package provides the numeric primitives shared by every lending
computation:
- full_math: wide multiply and rounding-aware multiply-divide
- fixed_point: Fixed128 (U68F60) and U64F64 binary fixed-point types
- price: Q64.64 sqrt price -> price conversions
- borrow_curve: utilization -> borrow-rate multiplier
- liquidity: concentrated-liquidity token amounts
"""

from tuna_core.math.borrow_curve import (
    DEFAULT_BORROW_CURVE,
    BorrowCurve,
    sample,
    sample_fixed,
    sample_float,
)
from tuna_core.math.fixed_point import U64F64, Fixed128, FixedPoint, bps_to_fraction
from tuna_core.math.full_math import Rounding, mul_div_64, mul_div_128, mul_u256, try_mul_div
from tuna_core.math.liquidity import (
    get_amount_delta_a,
    get_amount_delta_b,
    get_amounts_for_liquidity,
    get_liquidity_for_amounts,
)
from tuna_core.math.price import (
    sqrt_price_x64_to_price_fixed,
    sqrt_price_x64_to_price_float,
    sqrt_price_x64_to_price_x64,
)

__all__ = [
    # Fixed-point types
    "FixedPoint",
    "Fixed128",
    "U64F64",
    "bps_to_fraction",
    # Multiply-divide
    "Rounding",
    "mul_u256",
    "mul_div_64",
    "mul_div_128",
    "try_mul_div",
    # Price
    "sqrt_price_x64_to_price_fixed",
    "sqrt_price_x64_to_price_x64",
    "sqrt_price_x64_to_price_float",
    # Borrow curve
    "BorrowCurve",
    "DEFAULT_BORROW_CURVE",
    "sample",
    "sample_fixed",
    "sample_float",
    # Liquidity
    "get_amount_delta_a",
    "get_amount_delta_b",
    "get_amounts_for_liquidity",
    "get_liquidity_for_amounts",
]
