from __future__ import annotations

import logging
from dataclasses import dataclass

from hotelbot.application.ports.booking_store import BookingStorePort
from hotelbot.application.utils.availability import find_conflict
from hotelbot.domain.entities.booking import Booking
from hotelbot.domain.entities.date_range import DateRange


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    conflict: Booking | None = None


class AvailabilityUseCase:
    def __init__(self, store: BookingStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def check(self, room_id: str, date_range: DateRange) -> AvailabilityResult:
        bookings = self._store.find_by_room(room_id)
        conflict = find_conflict(date_range, bookings)
        if conflict is not None:
            self._logger.info(
                "Range not available",
                extra={"booking_id": conflict.id, "reason": f"{date_range.start}..{date_range.end}"},
            )
            return AvailabilityResult(available=False, conflict=conflict)
        return AvailabilityResult(available=True)
