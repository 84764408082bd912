"""Fee configuration for the lending protocol."""

from dataclasses import dataclass

from tuna_core.constants import HUNDRED_PERCENT, SWAP_FEE_DENOMINATOR


@dataclass(frozen=True)
class FeeConfig:
    """Centralized configuration for fee calculation.

    Attributes:
        hundred_percent: Protocol fee rate denominator; a rate equal to it is
            100% (default: 1_000_000, i.e. rates in hundredths of a basis point)
        swap_fee_denominator: Denominator of pool swap fee rates
            (default: 1_000_000)
    """

    hundred_percent: int = HUNDRED_PERCENT
    swap_fee_denominator: int = SWAP_FEE_DENOMINATOR

    def __post_init__(self) -> None:
        if self.hundred_percent <= 0:
            raise ValueError(f"hundred_percent must be positive, got {self.hundred_percent}")
        if self.swap_fee_denominator <= 0:
            raise ValueError(
                f"swap_fee_denominator must be positive, got {self.swap_fee_denominator}"
            )


# Default configuration instance
DEFAULT_FEE_CONFIG = FeeConfig()
