from __future__ import annotations

import json
import threading
from dataclasses import replace
from pathlib import Path
from typing import Any

from hotelbot.application.ports.booking_store import BookingStorePort
from hotelbot.application.utils.availability import find_conflict
from hotelbot.domain.entities.booking import ARTIFACTS_PENDING, ARTIFACTS_READY, Booking, BookingDraft
from hotelbot.domain.entities.date_range import DateRange
from hotelbot.infrastructure.store.memory_booking_store import build_booking, now_iso


class JsonBookingStore(BookingStorePort):
    """All bookings in one JSON file, rewritten atomically on every change."""

    def __init__(self, path: str = "./data/bookings.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def find_by_room(self, room_id: str) -> list[Booking]:
        with self._lock:
            data = self._load()
        return [self._deserialize(item) for item in data["bookings"] if item.get("room_id") == room_id]

    def create(self, draft: BookingDraft) -> Booking:
        booking = build_booking(draft)
        with self._lock:
            data = self._load()
            data["bookings"].append(self._serialize(booking))
            self._save(data)
        return booking

    def create_if_available(self, draft: BookingDraft) -> Booking | None:
        with self._lock:
            data = self._load()
            existing = [
                self._deserialize(item) for item in data["bookings"] if item.get("room_id") == draft.room_id
            ]
            if find_conflict(draft.date_range, existing) is not None:
                return None
            booking = build_booking(draft)
            data["bookings"].append(self._serialize(booking))
            self._save(data)
        return booking

    def get(self, booking_id: str) -> Booking | None:
        with self._lock:
            data = self._load()
        for item in data["bookings"]:
            if item.get("id") == booking_id:
                return self._deserialize(item)
        return None

    def mark_artifacts_ready(self, booking_id: str, qr_url: str, pdf_url: str) -> Booking:
        with self._lock:
            data = self._load()
            for index, item in enumerate(data["bookings"]):
                if item.get("id") != booking_id:
                    continue
                updated = replace(
                    self._deserialize(item),
                    artifacts_status=ARTIFACTS_READY,
                    qr_url=qr_url,
                    pdf_url=pdf_url,
                    updated_at=now_iso(),
                )
                data["bookings"][index] = self._serialize(updated)
                self._save(data)
                return updated
        raise KeyError(booking_id)

    def _load(self) -> dict[str, Any]:
        """Load the booking file. A missing file is an empty store; a corrupt one is an error."""
        if not self._path.exists():
            return {"bookings": [], "version": 1}
        with open(self._path, "r", encoding="utf-8") as f:
            data = json.load(f)
        data.setdefault("bookings", [])
        data.setdefault("version", 1)
        return data

    def _save(self, data: dict[str, Any]) -> None:
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _serialize(self, booking: Booking) -> dict[str, Any]:
        return {
            "id": booking.id,
            "guest_name": booking.guest_name,
            "phone": booking.phone,
            "room_id": booking.room_id,
            "party_size": booking.party_size,
            "start_date": booking.date_range.start,
            "end_date": booking.date_range.end,
            "origin": booking.origin,
            "status": booking.status,
            "created_at": booking.created_at,
            "updated_at": booking.updated_at,
            "artifacts_status": booking.artifacts_status,
            "qr_url": booking.qr_url,
            "pdf_url": booking.pdf_url,
        }

    def _deserialize(self, data: dict[str, Any]) -> Booking:
        return Booking(
            id=data["id"],
            guest_name=data.get("guest_name", ""),
            phone=data.get("phone", ""),
            room_id=str(data["room_id"]),
            party_size=int(data.get("party_size", 1)),
            date_range=DateRange(start=data["start_date"], end=data["end_date"]),
            origin=data.get("origin", ""),
            status=data.get("status", ""),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            artifacts_status=data.get("artifacts_status", ARTIFACTS_PENDING),
            qr_url=data.get("qr_url"),
            pdf_url=data.get("pdf_url"),
        )
