from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from orca_api.domain.entities.time_period import TimePeriod


@dataclass(frozen=True)
class GetPoolsInput:
    sort_by: str | None = None
    sort_direction: str | None = None
    next: str | None = None
    previous: str | None = None
    has_rewards: bool | None = None
    has_warning: bool | None = None
    has_adaptive_fee: bool | None = None
    is_wavebreak: bool | None = None
    min_tvl: float | None = None
    min_volume: float | None = None
    min_locked_liquidity_percent: float | None = None
    size: int | None = None
    token: Sequence[str | int] | None = None
    tokens_both_of: Sequence[str] | None = None
    addresses: Sequence[str] | None = None
    stats: Sequence[TimePeriod] | None = None
    include_blocked: bool | None = None


@dataclass(frozen=True)
class SearchPoolsInput:
    q: str
    next: str | None = None
    size: int | None = None
    sort_by: str | None = None
    sort_direction: str | None = None
    min_tvl: float | None = None
    min_volume: float | None = None
    stats: Sequence[TimePeriod] | None = None
    user_tokens: Sequence[str] | None = None
    has_rewards: bool | None = None
    verified_only: bool | None = None
    has_locked_liquidity: bool | None = None
