from __future__ import annotations

from dataclasses import dataclass

from hotelbot.domain.entities.date_range import DateRange

STATUS_CONFIRMED = "CONFIRMED"

ARTIFACTS_PENDING = "artifacts_pending"
ARTIFACTS_READY = "artifacts_ready"


@dataclass(frozen=True)
class BookingDraft:
    guest_name: str
    phone: str
    room_id: str
    party_size: int
    date_range: DateRange
    origin: str
    status: str = STATUS_CONFIRMED


@dataclass(frozen=True)
class Booking:
    id: str
    guest_name: str
    phone: str
    room_id: str
    party_size: int
    date_range: DateRange
    origin: str
    status: str
    created_at: str
    updated_at: str
    # Durable marker for the confirmation artifacts; a booking left in
    # "artifacts_pending" never got its QR/PDF delivered.
    artifacts_status: str = ARTIFACTS_PENDING
    qr_url: str | None = None
    pdf_url: str | None = None


@dataclass(frozen=True)
class BookingFacts:
    booking_id: str
    guest_name: str
    date_range: DateRange
    party_size: int
    room_id: str
