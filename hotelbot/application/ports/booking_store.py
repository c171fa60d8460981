from __future__ import annotations

from abc import ABC, abstractmethod

from hotelbot.domain.entities.booking import Booking, BookingDraft


class BookingStorePort(ABC):
    @abstractmethod
    def find_by_room(self, room_id: str) -> list[Booking]:
        """All bookings for a room, unfiltered by date."""
        raise NotImplementedError

    @abstractmethod
    def create(self, draft: BookingDraft) -> Booking:
        """Persist a booking. Assigns id and timestamps."""
        raise NotImplementedError

    @abstractmethod
    def create_if_available(self, draft: BookingDraft) -> Booking | None:
        """
        Persist a booking unless it overlaps an existing one for the same room.
        Check and insert are atomic. Returns None on conflict.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def mark_artifacts_ready(self, booking_id: str, qr_url: str, pdf_url: str) -> Booking:
        raise NotImplementedError
