from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from hotelbot.application.ports.booking_store import BookingStorePort
from hotelbot.application.utils.availability import find_conflict
from hotelbot.domain.entities.booking import ARTIFACTS_READY, Booking, BookingDraft


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}
        self._lock = threading.Lock()

    def find_by_room(self, room_id: str) -> list[Booking]:
        with self._lock:
            return self._room_bookings(room_id)

    def create(self, draft: BookingDraft) -> Booking:
        booking = build_booking(draft)
        with self._lock:
            self._bookings[booking.id] = booking
        return booking

    def create_if_available(self, draft: BookingDraft) -> Booking | None:
        with self._lock:
            if find_conflict(draft.date_range, self._room_bookings(draft.room_id)) is not None:
                return None
            booking = build_booking(draft)
            self._bookings[booking.id] = booking
            return booking

    def get(self, booking_id: str) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def mark_artifacts_ready(self, booking_id: str, qr_url: str, pdf_url: str) -> Booking:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                raise KeyError(booking_id)
            updated = replace(
                booking,
                artifacts_status=ARTIFACTS_READY,
                qr_url=qr_url,
                pdf_url=pdf_url,
                updated_at=now_iso(),
            )
            self._bookings[booking_id] = updated
            return updated

    def all(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def _room_bookings(self, room_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.room_id == room_id]


def build_booking(draft: BookingDraft) -> Booking:
    """New booking from a draft with a fresh id and creation timestamps."""
    now = now_iso()
    return Booking(
        id=new_booking_id(),
        guest_name=draft.guest_name,
        phone=draft.phone,
        room_id=draft.room_id,
        party_size=draft.party_size,
        date_range=draft.date_range,
        origin=draft.origin,
        status=draft.status,
        created_at=now,
        updated_at=now,
    )


def new_booking_id() -> str:
    return uuid.uuid4().hex[:20]


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
