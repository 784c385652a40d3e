from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetTokensInput:
    next: str | None = None
    previous: str | None = None
    size: int | None = None
    sort_by: str | None = None
    sort_direction: str | None = None
    tokens: str | None = None
