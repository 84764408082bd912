"""Protocol constants for the DefiTuna lending core.

Centralizes integer widths and protocol parameters so that a parameter
change is a single edit.
"""

# Unsigned integer bounds of the on-chain program
U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Rates are expressed in hundredths of a basis point: 1_000_000 = 100%
HUNDRED_PERCENT = 1_000_000

# Pool swap fee rates (u16) are expressed against this denominator
SWAP_FEE_DENOMINATOR = 1_000_000

# Market max_leverage is stored scaled by LEVERAGE_ONE (100 = 1.0x)
LEVERAGE_ONE = 100

# Borrow curve defaults
# Utilization at which the multiplier is exactly 1.0 (90%)
DEFAULT_TARGET_UTILIZATION = 900_000
# Multiplier at 100% utilization; the floor at 0% is its reciprocal
DEFAULT_MAX_BORROW_MULTIPLIER = 4

# Interest is not accrued more often than this, in seconds
INTEREST_ACCRUE_MIN_INTERVAL = 60

# Position token selectors used by the liquidation price helper
TOKEN_A = 0
TOKEN_B = 1

__all__ = [
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
    "HUNDRED_PERCENT",
    "SWAP_FEE_DENOMINATOR",
    "LEVERAGE_ONE",
    "DEFAULT_TARGET_UTILIZATION",
    "DEFAULT_MAX_BORROW_MULTIPLIER",
    "INTEREST_ACCRUE_MIN_INTERVAL",
    "TOKEN_A",
    "TOKEN_B",
]
