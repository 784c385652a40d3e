from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_BASE_URL = "https://api.orca.so/v2"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    orca_api_base_url: str
    orca_api_timeout_seconds: float


def get_settings() -> Settings:
    return Settings(
        orca_api_base_url=_env("ORCA_API_BASE_URL", DEFAULT_BASE_URL),
        orca_api_timeout_seconds=float(_env("ORCA_API_TIMEOUT_SECONDS", "10")),
    )
