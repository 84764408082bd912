"""Pydantic models for the account snapshots consumed by the lending math.

The account-fetch layer decodes raw account data into these models; the
math only relies on their numeric fields. Snapshots are immutable:
operations such as interest accrual return a new instance.
"""

from pydantic import BaseModel, Field

from tuna_core.models.types import U32, U64, U128, Bps, Pubkey


class Vault(BaseModel):
    """Lending vault state for one mint."""

    mint: Pubkey
    deposited_funds: U64 = Field(alias="depositedFunds")
    deposited_shares: U64 = Field(alias="depositedShares")
    borrowed_funds: U64 = Field(alias="borrowedFunds")
    borrowed_shares: U64 = Field(alias="borrowedShares")
    unpaid_debt_shares: U64 = Field(default=0, alias="unpaidDebtShares")
    interest_rate: U64 = Field(
        alias="interestRate",
        description="Per-second interest rate as a Fixed128 bit pattern.",
    )
    last_update_timestamp: U64 = Field(alias="lastUpdateTimestamp")

    model_config = {"populate_by_name": True, "frozen": True}


class Market(BaseModel):
    """Market parameters for a liquidity pool."""

    pool: Pubkey
    max_leverage: U32 = Field(alias="maxLeverage", description="Scaled by LEVERAGE_ONE.")
    protocol_fee: Bps = Field(default=0, alias="protocolFee")
    protocol_fee_on_collateral: Bps = Field(default=0, alias="protocolFeeOnCollateral")
    liquidation_threshold: Bps = Field(alias="liquidationThreshold")

    model_config = {"populate_by_name": True, "frozen": True}


class LiquidityPosition(BaseModel):
    """Leveraged concentrated-liquidity position.

    The range is given by its sqrt price bounds (Q64.64); converting tick
    indices to sqrt prices belongs to the pool integration.
    """

    mint_a: Pubkey = Field(alias="mintA")
    mint_b: Pubkey = Field(alias="mintB")
    liquidity: U128
    sqrt_price_lower: U128 = Field(alias="sqrtPriceLower")
    sqrt_price_upper: U128 = Field(alias="sqrtPriceUpper")
    leftovers_a: U64 = Field(default=0, alias="leftoversA")
    leftovers_b: U64 = Field(default=0, alias="leftoversB")
    loan_shares_a: U64 = Field(default=0, alias="loanSharesA")
    loan_shares_b: U64 = Field(default=0, alias="loanSharesB")

    model_config = {"populate_by_name": True, "frozen": True}
