from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConversationStep(str, Enum):
    IDLE = "idle"
    AWAITING_DATE_RANGE = "awaiting_date_range"


@dataclass(frozen=True)
class Session:
    step: ConversationStep = ConversationStep.IDLE
    updated_at: float | None = None
