from __future__ import annotations

from functools import lru_cache

from orca_api.infrastructure.clients.orca_client import (
    AsyncOrcaClient,
    OrcaClient,
    OrcaClientSettings,
)
from orca_api.shared.config import get_settings


def _client_settings() -> OrcaClientSettings:
    settings = get_settings()
    return OrcaClientSettings(
        base_url=settings.orca_api_base_url,
        timeout_seconds=settings.orca_api_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_orca_client() -> OrcaClient:
    return OrcaClient(_client_settings())


# Not cached: an httpx.AsyncClient is bound to the event loop it is used on.
def build_async_orca_client() -> AsyncOrcaClient:
    return AsyncOrcaClient(_client_settings())
