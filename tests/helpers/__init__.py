"""Test helpers and factories."""

from tests.helpers.constants import (
    SOL_MINT,
    SOL_USDC_POOL,
    SQRT_PRICE_ONE,
    SQRT_PRICE_TWO,
    USDC_MINT,
)
from tests.helpers.factories import encode_price_sqrt, make_market, make_position, make_vault

__all__ = [
    "SOL_MINT",
    "USDC_MINT",
    "SOL_USDC_POOL",
    "SQRT_PRICE_ONE",
    "SQRT_PRICE_TWO",
    "encode_price_sqrt",
    "make_market",
    "make_position",
    "make_vault",
]
