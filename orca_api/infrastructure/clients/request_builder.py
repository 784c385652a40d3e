from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from typing import Any

import httpx

from orca_api.application.dto.pools import GetPoolsInput, SearchPoolsInput
from orca_api.application.dto.tokens import GetTokensInput
from orca_api.domain.entities.time_period import TimePeriod
from orca_api.domain.exceptions import InvalidBaseUrlError
from orca_api.shared.config import DEFAULT_BASE_URL


logger = logging.getLogger(__name__)


QueryPairs = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class ApiRequest:
    endpoint: str
    params: QueryPairs = ()

    @property
    def url(self) -> httpx.URL:
        if not self.params:
            return httpx.URL(self.endpoint)
        return httpx.URL(self.endpoint, params=list(self.params))


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def encode_number(value: int | float) -> str:
    """Plain decimal form, never exponent notation (``1e-05`` -> ``0.00001``)."""
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got bool: {value!r}")
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def encode_period(value: TimePeriod | str) -> str:
    return TimePeriod(value).value


class _QueryPairs:
    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def text(self, key: str, value: str | None) -> None:
        if value is not None:
            self._pairs.append((key, value))

    def flag(self, key: str, value: bool | None) -> None:
        if value is not None:
            self._pairs.append((key, encode_bool(value)))

    def number(self, key: str, value: int | float | None) -> None:
        if value is not None:
            self._pairs.append((key, encode_number(value)))

    def repeated(
        self,
        key: str,
        values: Iterable[Any] | None,
        encode: Callable[[Any], str] = str,
    ) -> None:
        if values is None:
            return
        for value in values:
            self._pairs.append((key, encode(value)))

    def freeze(self) -> QueryPairs:
        return tuple(self._pairs)


class OrcaRequestBuilder:
    """Maps typed inputs to Orca API GET requests.

    Path identifiers (chain, mint and pool addresses) are interpolated as
    given. Optional filters left as ``None`` never reach the query string and
    list filters are sent as one repeated key per element, in input order.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self._base_url = _validate_base_url(base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_protocol_info(self, chain: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, "protocol"))

    def build_token_info(self, chain: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, "protocol/token"))

    def build_circulating_supply(self, chain: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, "protocol/token/circulating_supply"))

    def build_total_supply(self, chain: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, "protocol/token/total_supply"))

    def build_tokens(self, chain: str, params: GetTokensInput | None = None) -> ApiRequest:
        params = params or GetTokensInput()
        query = _QueryPairs()
        query.text("next", params.next)
        query.text("previous", params.previous)
        query.number("size", params.size)
        query.text("sort_by", params.sort_by)
        query.text("sort_direction", params.sort_direction)
        query.text("tokens", params.tokens)
        return ApiRequest(self._endpoint(chain, "tokens"), query.freeze())

    def build_search_tokens(self, chain: str, query_text: str) -> ApiRequest:
        query = _QueryPairs()
        query.text("q", query_text)
        return ApiRequest(self._endpoint(chain, "tokens/search"), query.freeze())

    def build_token(self, chain: str, mint_address: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, f"tokens/{mint_address}"))

    def build_lock_info(self, chain: str, address: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, f"lock/{address}"))

    def build_pools(self, chain: str, params: GetPoolsInput | None = None) -> ApiRequest:
        params = params or GetPoolsInput()
        query = _QueryPairs()
        query.text("sortBy", params.sort_by)
        query.text("sortDirection", params.sort_direction)
        query.text("next", params.next)
        query.text("previous", params.previous)
        query.flag("hasRewards", params.has_rewards)
        query.flag("hasWarning", params.has_warning)
        query.flag("hasAdaptiveFee", params.has_adaptive_fee)
        query.flag("isWavebreak", params.is_wavebreak)
        query.number("minTvl", params.min_tvl)
        query.number("minVolume", params.min_volume)
        query.number("minLockedLiquidityPercent", params.min_locked_liquidity_percent)
        query.number("size", params.size)
        query.repeated("token", params.token)
        query.repeated("tokensBothOf", params.tokens_both_of)
        query.repeated("addresses", params.addresses)
        query.repeated("stats", params.stats, encode_period)
        query.flag("includeBlocked", params.include_blocked)
        return ApiRequest(self._endpoint(chain, "pools"), query.freeze())

    def build_search_pools(self, chain: str, params: SearchPoolsInput) -> ApiRequest:
        query = _QueryPairs()
        query.text("q", params.q)
        query.text("next", params.next)
        query.number("size", params.size)
        query.text("sortBy", params.sort_by)
        query.text("sortDirection", params.sort_direction)
        query.number("minTvl", params.min_tvl)
        query.number("minVolume", params.min_volume)
        query.repeated("stats", params.stats, encode_period)
        query.repeated("userTokens", params.user_tokens)
        query.flag("hasRewards", params.has_rewards)
        query.flag("verifiedOnly", params.verified_only)
        query.flag("hasLockedLiquidity", params.has_locked_liquidity)
        return ApiRequest(self._endpoint(chain, "pools/search"), query.freeze())

    def build_pool(self, chain: str, address: str) -> ApiRequest:
        return ApiRequest(self._endpoint(chain, f"pools/{address}"))

    def _endpoint(self, chain: str, path: str) -> str:
        return f"{self._base_url}/{chain}/{path}"


def _validate_base_url(base_url: str) -> str:
    candidate = (base_url or "").strip().rstrip("/")
    try:
        parsed = httpx.URL(candidate)
    except httpx.InvalidURL as exc:
        raise InvalidBaseUrlError(f"Invalid Orca API base URL: {base_url!r}") from exc

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidBaseUrlError(
            f"Orca API base URL must be an absolute http(s) URL: {base_url!r}"
        )
    if parsed.query or parsed.fragment:
        raise InvalidBaseUrlError(
            f"Orca API base URL must not carry a query or fragment: {base_url!r}"
        )

    logger.debug("orca_request_builder: base_url=%s", candidate)
    return candidate
