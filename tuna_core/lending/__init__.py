"""Lending computations on vault and position snapshots."""

from tuna_core.lending.position import (
    compute_leverage,
    compute_total_and_debt,
    get_liquidation_price,
    get_max_leverage,
    get_total_balance,
    is_healthy,
)
from tuna_core.lending.vault import (
    accrue_interest,
    calculate_borrowed_funds,
    calculate_borrowed_shares,
    calculate_deposited_funds,
    calculate_deposited_shares,
    compounded_interest_rate,
    funds_to_shares,
    get_utilization,
    get_utilization_fixed,
    shares_to_funds,
)

__all__ = [
    # Vault
    "funds_to_shares",
    "shares_to_funds",
    "calculate_deposited_shares",
    "calculate_deposited_funds",
    "calculate_borrowed_shares",
    "calculate_borrowed_funds",
    "get_utilization",
    "get_utilization_fixed",
    "compounded_interest_rate",
    "accrue_interest",
    # Position
    "get_total_balance",
    "compute_total_and_debt",
    "compute_leverage",
    "is_healthy",
    "get_max_leverage",
    "get_liquidation_price",
]
