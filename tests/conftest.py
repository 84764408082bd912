"""Pytest configuration and fixtures."""

import pytest

from tests.helpers import USDC_MINT, make_market, make_vault
from tuna_core.models import Market, Vault


@pytest.fixture
def vault_a() -> Vault:
    """SOL vault: 1_000 borrowed funds over 1_000 shares."""
    return make_vault()


@pytest.fixture
def vault_b() -> Vault:
    """USDC vault: 3_000 borrowed funds over 2_000 shares."""
    return make_vault(
        mint=USDC_MINT,
        deposited_funds=50_000,
        deposited_shares=50_000,
        borrowed_funds=3_000,
        borrowed_shares=2_000,
    )


@pytest.fixture
def market() -> Market:
    return make_market()
