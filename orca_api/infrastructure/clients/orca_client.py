from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, TypeVar

import httpx

from orca_api.application.dto.pools import GetPoolsInput, SearchPoolsInput
from orca_api.application.dto.tokens import GetTokensInput
from orca_api.domain.exceptions import TransportError
from orca_api.infrastructure.clients.request_builder import ApiRequest, OrcaRequestBuilder
from orca_api.infrastructure.clients.response_mapper import decode_response, describe_target
from orca_api.schemas.pagination import Paginated
from orca_api.schemas.pool import Whirlpool
from orca_api.schemas.protocol import (
    CirculatingSupplyResponse,
    ProtocolInfo,
    TokenInfo,
    TotalSupplyResponse,
)
from orca_api.schemas.token import LockInfo, Token
from orca_api.shared.config import DEFAULT_BASE_URL


logger = logging.getLogger(__name__)


T = TypeVar("T")


@dataclass(frozen=True)
class OrcaClientSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0


def _transport_error(exc: Exception, url: httpx.URL | str) -> TransportError:
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        logger.warning(
            "orca_client: http_status_error status=%s url=%s",
            status_code,
            url,
        )
        return TransportError(
            f"Orca API returned status code: {status_code}",
            url=str(url),
            status_code=status_code,
        )

    logger.warning(
        "orca_client: request_failed url=%s error_type=%s error=%s",
        url,
        type(exc).__name__,
        exc,
    )
    return TransportError(f"Orca API request failed: {exc!s}", url=str(url))


def _log_decoded(url: httpx.URL, target: Any, result: Any) -> None:
    if isinstance(result, Paginated):
        items = len(result.data)
    elif isinstance(result, list):
        items = len(result)
    else:
        items = 1
    logger.info(
        "orca_client: fetched target=%s items=%s url=%s",
        describe_target(target),
        items,
        url,
    )


class OrcaClient:
    """Blocking client for the Orca public API.

    An injected ``http_client`` is shared as-is and left open on
    :meth:`close`; a client created here is owned and closed by this instance.
    """

    def __init__(
        self,
        settings: OrcaClientSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ):
        self._settings = settings or OrcaClientSettings()
        self._builder = OrcaRequestBuilder(self._settings.base_url)
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self._settings.timeout_seconds)

    @classmethod
    def with_base_url(cls, base_url: str, *, http_client: httpx.Client | None = None) -> "OrcaClient":
        return cls(OrcaClientSettings(base_url=base_url), http_client=http_client)

    @property
    def request_builder(self) -> OrcaRequestBuilder:
        return self._builder

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "OrcaClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.close()

    def get_protocol_info(self, chain: str) -> ProtocolInfo:
        return self._fetch(self._builder.build_protocol_info(chain), ProtocolInfo)

    def get_token_info(self, chain: str) -> TokenInfo:
        return self._fetch(self._builder.build_token_info(chain), TokenInfo)

    def get_circulating_supply(self, chain: str) -> CirculatingSupplyResponse:
        return self._fetch(self._builder.build_circulating_supply(chain), CirculatingSupplyResponse)

    def get_total_supply(self, chain: str) -> TotalSupplyResponse:
        return self._fetch(self._builder.build_total_supply(chain), TotalSupplyResponse)

    def get_tokens(self, chain: str, params: GetTokensInput | None = None) -> Paginated[Token]:
        return self._fetch(self._builder.build_tokens(chain, params), Paginated[Token])

    def search_tokens(self, chain: str, query: str) -> Paginated[Token]:
        return self._fetch(self._builder.build_search_tokens(chain, query), Paginated[Token])

    def get_token(self, chain: str, mint_address: str) -> Paginated[Token]:
        return self._fetch(self._builder.build_token(chain, mint_address), Paginated[Token])

    def get_lock_info(self, chain: str, address: str) -> list[LockInfo]:
        return self._fetch(self._builder.build_lock_info(chain, address), list[LockInfo])

    def get_pools(self, chain: str, params: GetPoolsInput | None = None) -> Paginated[Whirlpool]:
        return self._fetch(self._builder.build_pools(chain, params), Paginated[Whirlpool])

    def search_pools(self, chain: str, params: SearchPoolsInput) -> Paginated[Whirlpool]:
        return self._fetch(self._builder.build_search_pools(chain, params), Paginated[Whirlpool])

    def get_pool(self, chain: str, address: str) -> Paginated[Whirlpool]:
        return self._fetch(self._builder.build_pool(chain, address), Paginated[Whirlpool])

    def _fetch(self, request: ApiRequest, target: type[T]) -> T:
        url: httpx.URL | str = request.endpoint
        try:
            url = request.url
            logger.debug("orca_client: request url=%s", url)
            response = self._http.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _transport_error(exc, url) from exc

        result = decode_response(response.content, target)
        _log_decoded(url, target, result)
        return result


class AsyncOrcaClient:
    """Asyncio counterpart of :class:`OrcaClient` with the same operations."""

    def __init__(
        self,
        settings: OrcaClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._settings = settings or OrcaClientSettings()
        self._builder = OrcaRequestBuilder(self._settings.base_url)
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self._settings.timeout_seconds)

    @classmethod
    def with_base_url(
        cls,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "AsyncOrcaClient":
        return cls(OrcaClientSettings(base_url=base_url), http_client=http_client)

    @property
    def request_builder(self) -> OrcaRequestBuilder:
        return self._builder

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncOrcaClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        await self.aclose()

    async def get_protocol_info(self, chain: str) -> ProtocolInfo:
        return await self._fetch(self._builder.build_protocol_info(chain), ProtocolInfo)

    async def get_token_info(self, chain: str) -> TokenInfo:
        return await self._fetch(self._builder.build_token_info(chain), TokenInfo)

    async def get_circulating_supply(self, chain: str) -> CirculatingSupplyResponse:
        return await self._fetch(
            self._builder.build_circulating_supply(chain), CirculatingSupplyResponse
        )

    async def get_total_supply(self, chain: str) -> TotalSupplyResponse:
        return await self._fetch(self._builder.build_total_supply(chain), TotalSupplyResponse)

    async def get_tokens(self, chain: str, params: GetTokensInput | None = None) -> Paginated[Token]:
        return await self._fetch(self._builder.build_tokens(chain, params), Paginated[Token])

    async def search_tokens(self, chain: str, query: str) -> Paginated[Token]:
        return await self._fetch(self._builder.build_search_tokens(chain, query), Paginated[Token])

    async def get_token(self, chain: str, mint_address: str) -> Paginated[Token]:
        return await self._fetch(self._builder.build_token(chain, mint_address), Paginated[Token])

    async def get_lock_info(self, chain: str, address: str) -> list[LockInfo]:
        return await self._fetch(self._builder.build_lock_info(chain, address), list[LockInfo])

    async def get_pools(
        self,
        chain: str,
        params: GetPoolsInput | None = None,
    ) -> Paginated[Whirlpool]:
        return await self._fetch(self._builder.build_pools(chain, params), Paginated[Whirlpool])

    async def search_pools(self, chain: str, params: SearchPoolsInput) -> Paginated[Whirlpool]:
        return await self._fetch(
            self._builder.build_search_pools(chain, params), Paginated[Whirlpool]
        )

    async def get_pool(self, chain: str, address: str) -> Paginated[Whirlpool]:
        return await self._fetch(self._builder.build_pool(chain, address), Paginated[Whirlpool])

    async def _fetch(self, request: ApiRequest, target: type[T]) -> T:
        url: httpx.URL | str = request.endpoint
        try:
            url = request.url
            logger.debug("orca_client: request url=%s", url)
            response = await self._http.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _transport_error(exc, url) from exc

        result = decode_response(response.content, target)
        _log_decoded(url, target, result)
        return result
