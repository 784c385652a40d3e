from __future__ import annotations

from enum import Enum


class TimePeriod(str, Enum):
    """Statistics window; the value is the literal used on the wire."""

    M5 = "5m"
    M15 = "15m"
    M30 = "30m"
    H1 = "1h"
    H2 = "2h"
    H4 = "4h"
    H8 = "8h"
    H12 = "12h"
    H24 = "24h"

    def __str__(self) -> str:
        return self.value
