from __future__ import annotations

from typing import Iterable

from hotelbot.domain.entities.booking import Booking
from hotelbot.domain.entities.date_range import DateRange


def ranges_overlap(a: DateRange, b: DateRange) -> bool:
    """Closed-interval intersection on ISO date strings. Touching ranges overlap."""
    return not (a.end < b.start or a.start > b.end)


def find_conflict(candidate: DateRange, bookings: Iterable[Booking]) -> Booking | None:
    for booking in bookings:
        if ranges_overlap(candidate, booking.date_range):
            return booking
    return None


def is_range_available(candidate: DateRange, bookings: Iterable[Booking]) -> bool:
    return find_conflict(candidate, bookings) is None
