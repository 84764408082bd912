"""Pydantic models for account snapshots."""

from tuna_core.models.accounts import LiquidityPosition, Market, Vault
from tuna_core.models.types import U16, U32, U64, U128, Bps, Pubkey

__all__ = [
    # Types
    "U16",
    "U32",
    "U64",
    "U128",
    "Bps",
    "Pubkey",
    # Accounts
    "Vault",
    "Market",
    "LiquidityPosition",
]
