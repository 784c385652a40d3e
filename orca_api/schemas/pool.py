from __future__ import annotations

from pydantic import BaseModel

from orca_api.domain.entities.time_period import TimePeriod
from orca_api.schemas.token import LockInfo
from orca_api.schemas.wire import I32, U8, U16, U32, U64, RawJsonText, wire_model_config


class AdaptiveFeeConstants(BaseModel):
    model_config = wire_model_config(
        {
            "adaptive_fee_control_factor": "adaptiveFeeControlFactor",
            "decay_period": "decayPeriod",
            "filter_period": "filterPeriod",
            "major_swap_threshold_ticks": "majorSwapThresholdTicks",
            "max_volatility_accumulator": "maxVolatilityAccumulator",
            "reduction_factor": "reductionFactor",
            "tick_group_size": "tickGroupSize",
        }
    )

    adaptive_fee_control_factor: U32
    decay_period: U32
    filter_period: U32
    major_swap_threshold_ticks: U32
    max_volatility_accumulator: U32
    reduction_factor: U32
    tick_group_size: U32


class AdaptiveFeeVariables(BaseModel):
    model_config = wire_model_config(
        {
            "last_major_swap_timestamp": "lastMajorSwapTimestamp",
            "last_reference_update_timestamp": "lastReferenceUpdateTimestamp",
            "tick_group_index_reference": "tickGroupIndexReference",
            "volatility_accumulator": "volatilityAccumulator",
            "volatility_reference": "volatilityReference",
        }
    )

    last_major_swap_timestamp: str
    last_reference_update_timestamp: str
    tick_group_index_reference: I32
    volatility_accumulator: U32
    volatility_reference: U32


class AdaptiveFee(BaseModel):
    model_config = wire_model_config(
        {
            "current_rate": "currentRate",
            "max_rate": "maxRate",
        }
    )

    constants: AdaptiveFeeConstants
    current_rate: U32
    max_rate: U32
    variables: AdaptiveFeeVariables


class Reward(BaseModel):
    # The x64 fields are snake_case on the wire as well.
    model_config = wire_model_config({"emissions_per_second": "emissionsPerSecond"})

    authority: str
    emissions_per_second_x64: str
    growth_global_x64: str
    mint: str
    vault: str
    active: bool
    emissions_per_second: str


class PoolStats(BaseModel):
    model_config = wire_model_config({"yield_over_tvl": "yieldOverTvl"})

    fees: str
    rewards: str
    volume: str
    yield_over_tvl: str


class SimpleTokenInfo(BaseModel):
    model_config = wire_model_config(
        {
            "image_url": "imageUrl",
            "program_id": "programId",
        }
    )

    address: str
    decimals: U8
    image_url: str
    name: str
    program_id: str
    symbol: str
    tags: RawJsonText


class Whirlpool(BaseModel):
    """A whirlpool as returned by the pools endpoints.

    ``stats`` is keyed by :class:`TimePeriod`; any other key fails decoding.
    ``adaptive_fee`` is only present for pools on an adaptive fee tier.
    """

    model_config = wire_model_config(
        {
            "fee_growth_global_a": "feeGrowthGlobalA",
            "fee_growth_global_b": "feeGrowthGlobalB",
            "fee_rate": "feeRate",
            "protocol_fee_owed_a": "protocolFeeOwedA",
            "protocol_fee_owed_b": "protocolFeeOwedB",
            "protocol_fee_rate": "protocolFeeRate",
            "reward_last_updated_timestamp": "rewardLastUpdatedTimestamp",
            "sqrt_price": "sqrtPrice",
            "tick_current_index": "tickCurrentIndex",
            "tick_spacing": "tickSpacing",
            "tick_spacing_seed": "tickSpacingSeed",
            "token_mint_a": "tokenMintA",
            "token_mint_b": "tokenMintB",
            "token_vault_a": "tokenVaultA",
            "token_vault_b": "tokenVaultB",
            "updated_at": "updatedAt",
            "updated_slot": "updatedSlot",
            "whirlpool_bump": "whirlpoolBump",
            "whirlpools_config": "whirlpoolsConfig",
            "write_version": "writeVersion",
            "adaptive_fee": "adaptiveFee",
            "adaptive_fee_enabled": "adaptiveFeeEnabled",
            "address_lookup_table": "addressLookupTable",
            "fee_tier_index": "feeTierIndex",
            "has_warning": "hasWarning",
            "locked_liquidity_percent": "lockedLiquidityPercent",
            "pool_type": "poolType",
            "token_a": "tokenA",
            "token_b": "tokenB",
            "token_balance_a": "tokenBalanceA",
            "token_balance_b": "tokenBalanceB",
            "trade_enable_timestamp": "tradeEnableTimestamp",
            "tvl_usdc": "tvlUsdc",
            "yield_over_tvl": "yieldOverTvl",
        }
    )

    address: str
    fee_growth_global_a: str
    fee_growth_global_b: str
    fee_rate: U32
    liquidity: str
    protocol_fee_owed_a: str
    protocol_fee_owed_b: str
    protocol_fee_rate: U32
    reward_last_updated_timestamp: str
    sqrt_price: str
    tick_current_index: I32
    tick_spacing: U16
    tick_spacing_seed: str
    token_mint_a: str
    token_mint_b: str
    token_vault_a: list[U64]
    token_vault_b: str
    updated_at: str
    updated_slot: U64
    whirlpool_bump: str
    whirlpools_config: str
    write_version: str
    adaptive_fee: AdaptiveFee | None = None
    adaptive_fee_enabled: bool
    address_lookup_table: list[U64]
    fee_tier_index: U32
    has_warning: bool
    locked_liquidity_percent: list[LockInfo] | None = None
    pool_type: str
    price: str
    rewards: list[Reward]
    stats: dict[TimePeriod, PoolStats]
    token_a: SimpleTokenInfo
    token_b: SimpleTokenInfo
    token_balance_a: str
    token_balance_b: str
    trade_enable_timestamp: str
    tvl_usdc: str
    yield_over_tvl: str
