from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DateRange:
    start: str  # YYYY-MM-DD, inclusive
    end: str  # YYYY-MM-DD, inclusive
