"""Shared type definitions for account snapshot models.

Account fields arrive either as ints or as decimal strings (u64/u128 values
do not survive a JSON float round-trip), so every integer type accepts both
and validates the unsigned range of the on-chain field.
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from tuna_core.constants import HUNDRED_PERCENT


def uint_validator(bits: int) -> Callable[[Any], int]:
    """Build a validator for an unsigned integer of the given bit width."""

    def validate(value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"u{bits} must be an integer, got bool")
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError as err:
                raise ValueError(f"u{bits} must be a decimal integer string: '{value}'") from err
        if not isinstance(value, int):
            raise ValueError(f"u{bits} must be string or int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"u{bits} cannot be negative: {value}")
        if value >> bits:
            raise ValueError(f"u{bits} overflow: {value} > 2^{bits}-1")
        return value

    return validate


U16 = Annotated[int, BeforeValidator(uint_validator(16))]
U32 = Annotated[int, BeforeValidator(uint_validator(32))]
U64 = Annotated[int, BeforeValidator(uint_validator(64))]
U128 = Annotated[int, BeforeValidator(uint_validator(128))]

# Rate in hundredths of a basis point (1_000_000 = 100%)
Bps = Annotated[
    int,
    BeforeValidator(uint_validator(32)),
    Field(le=HUNDRED_PERCENT, description="Rate where 1_000_000 = 100%"),
]

# Solana public key (base58, 32 bytes)
Pubkey = Annotated[str, Field(pattern=r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")]
