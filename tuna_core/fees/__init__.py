"""Fee calculation module for the lending core.

This module provides centralized protocol fee handling:
- Forward and reverse fee application with explicit rounding
- Blended collateral/borrow fee, split per token for spot positions
- Pool swap fee application and its inverse
- Configurable rate denominator

Usage:
    from tuna_core.fees import DefaultFeeCalculator, FeeConfig

    calculator = DefaultFeeCalculator()
    net = calculator.apply_fee(1_000_000, 3000, round_up=False)  # 997_000
"""

from tuna_core.fees.calculator import (
    DEFAULT_FEE_CALCULATOR,
    DefaultFeeCalculator,
    FeeCalculator,
    apply_fee,
    apply_swap_fee,
    blended_fee,
    reverse_apply_fee,
    reverse_apply_swap_fee,
    spot_position_protocol_fee,
)
from tuna_core.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from tuna_core.fees.result import TokenPair

__all__ = [
    # Calculator
    "FeeCalculator",
    "DefaultFeeCalculator",
    "DEFAULT_FEE_CALCULATOR",
    "apply_fee",
    "reverse_apply_fee",
    "blended_fee",
    "apply_swap_fee",
    "reverse_apply_swap_fee",
    "spot_position_protocol_fee",
    # Config
    "FeeConfig",
    "DEFAULT_FEE_CONFIG",
    # Results
    "TokenPair",
]
