"""Tests for account snapshot models."""

import pytest
from pydantic import ValidationError

from tests.helpers import SOL_MINT, SOL_USDC_POOL, USDC_MINT, make_vault
from tuna_core.constants import U64_MAX, U128_MAX
from tuna_core.models import LiquidityPosition, Market, Vault


class TestVault:
    """Tests for vault parsing and validation."""

    def test_parse_camel_case_with_string_amounts(self):
        vault = Vault.model_validate(
            {
                "mint": SOL_MINT,
                "depositedFunds": str(U64_MAX),
                "depositedShares": "1000",
                "borrowedFunds": 900,
                "borrowedShares": "800",
                "interestRate": "1152921504606",
                "lastUpdateTimestamp": 1_700_000_000,
            }
        )
        assert vault.deposited_funds == U64_MAX
        assert vault.borrowed_shares == 800
        assert vault.unpaid_debt_shares == 0

    def test_u64_overflow(self):
        with pytest.raises(ValidationError, match="overflow"):
            make_vault(deposited_funds=U64_MAX + 1)

    def test_negative(self):
        with pytest.raises(ValidationError, match="negative"):
            make_vault(borrowed_funds=-1)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            make_vault(borrowed_funds=True)

    def test_non_numeric_string(self):
        with pytest.raises(ValidationError):
            make_vault(borrowed_funds="12abc")

    def test_invalid_mint(self):
        with pytest.raises(ValidationError):
            make_vault(mint="not-a-pubkey")

    def test_frozen(self):
        vault = make_vault()
        with pytest.raises(ValidationError):
            vault.borrowed_funds = 0

    def test_model_copy(self):
        vault = make_vault()
        updated = vault.model_copy(update={"last_update_timestamp": 42})
        assert updated.last_update_timestamp == 42
        assert vault.last_update_timestamp == 0


class TestMarket:
    """Tests for market parameters."""

    def test_parse(self):
        market = Market.model_validate(
            {"pool": SOL_USDC_POOL, "maxLeverage": 1020, "liquidationThreshold": 920_000}
        )
        assert market.max_leverage == 1020
        assert market.protocol_fee == 0

    def test_threshold_above_hundred_percent(self):
        with pytest.raises(ValidationError):
            Market(pool=SOL_USDC_POOL, max_leverage=1020, liquidation_threshold=1_000_001)

    def test_max_leverage_is_u32(self):
        with pytest.raises(ValidationError):
            Market(pool=SOL_USDC_POOL, max_leverage=1 << 32, liquidation_threshold=920_000)


class TestLiquidityPosition:
    """Tests for position snapshots."""

    def test_parse_u128_fields(self):
        position = LiquidityPosition.model_validate(
            {
                "mintA": SOL_MINT,
                "mintB": USDC_MINT,
                "liquidity": str(U128_MAX),
                "sqrtPriceLower": str(1 << 63),
                "sqrtPriceUpper": str(1 << 65),
            }
        )
        assert position.liquidity == U128_MAX
        assert position.loan_shares_a == 0
        assert position.leftovers_b == 0

    def test_u128_overflow(self):
        with pytest.raises(ValidationError):
            LiquidityPosition(
                mint_a=SOL_MINT,
                mint_b=USDC_MINT,
                liquidity=U128_MAX + 1,
                sqrt_price_lower=1,
                sqrt_price_upper=2,
            )
