from __future__ import annotations

import logging
from dataclasses import dataclass

from hotelbot.application.exceptions import CollaboratorError
from hotelbot.application.ports.artifact_store import ArtifactStorePort
from hotelbot.application.ports.booking_store import BookingStorePort
from hotelbot.application.ports.code_generator import CodeGeneratorPort
from hotelbot.application.ports.document_renderer import DocumentRendererPort
from hotelbot.application.ports.messaging import MessagingSenderPort
from hotelbot.application.utils.replies import (
    PIPELINE_FAILURE_TEXT,
    build_code_payload,
    build_confirmation_text,
    build_unavailable_text,
)
from hotelbot.domain.entities.booking import Booking, BookingDraft, BookingFacts
from hotelbot.domain.entities.date_range import DateRange
from hotelbot.domain.entities.reply import ChatReply


@dataclass(frozen=True)
class GuestDefaults:
    guest_name: str
    room_id: str
    party_size: int
    origin: str


class ConfirmBookingUseCase:
    """
    Booking confirmation pipeline.

    Steps run strictly in order, each depending on the previous one:
      create booking (if still free) -> QR image -> store QR -> PDF -> store PDF -> send.

    Nothing is rolled back. If a step after `create_booking` fails, the booking
    stays CONFIRMED with artifacts_status="artifacts_pending" and the guest
    gets a generic failure reply instead of the document.
    """

    def __init__(
        self,
        bookings: BookingStorePort,
        code_generator: CodeGeneratorPort,
        renderer: DocumentRendererPort,
        artifacts: ArtifactStorePort,
        sender: MessagingSenderPort,
        defaults: GuestDefaults,
    ) -> None:
        self._bookings = bookings
        self._code_generator = code_generator
        self._renderer = renderer
        self._artifacts = artifacts
        self._sender = sender
        self._defaults = defaults
        self._logger = logging.getLogger(__name__)

    def execute(self, identity: str, date_range: DateRange) -> ChatReply:
        try:
            return self._run(identity, date_range)
        except CollaboratorError as e:
            self._logger.error(
                "Booking confirmation failed",
                extra={"identity": identity, "step": e.step, "error": str(e)},
            )
            return ChatReply(text=PIPELINE_FAILURE_TEXT)

    def _run(self, identity: str, date_range: DateRange) -> ChatReply:
        draft = BookingDraft(
            guest_name=self._defaults.guest_name,
            phone=_phone_from_identity(identity),
            room_id=self._defaults.room_id,
            party_size=self._defaults.party_size,
            date_range=date_range,
            origin=self._defaults.origin,
        )
        booking: Booking | None = _step("create_booking", self._bookings.create_if_available, draft)
        if booking is None:
            # Another guest took an overlapping range after the availability check.
            self._logger.info("Range taken before booking was created", extra={"identity": identity})
            return ChatReply(text=build_unavailable_text(date_range))
        self._logger.info("Booking created", extra={"identity": identity, "booking_id": booking.id})

        payload = build_code_payload(booking.id, date_range, booking.room_id)
        qr_png = _step("encode_code", self._code_generator.encode, payload)
        qr_url = _step("store_code", self._artifacts.put, f"reserva-{booking.id}.png", qr_png)

        facts = BookingFacts(
            booking_id=booking.id,
            guest_name=booking.guest_name,
            date_range=date_range,
            party_size=booking.party_size,
            room_id=booking.room_id,
        )
        pdf = _step("render_document", self._renderer.render, facts, qr_png)
        pdf_url = _step("store_document", self._artifacts.put, f"reserva-{booking.id}.pdf", pdf)

        _step("mark_artifacts_ready", self._bookings.mark_artifacts_ready, booking.id, qr_url, pdf_url)

        text = build_confirmation_text(booking.id, date_range)
        _step("send_confirmation", self._sender.send, identity, text, pdf_url)
        self._logger.info("Booking confirmation sent", extra={"identity": identity, "booking_id": booking.id})

        return ChatReply(text=text, media_url=pdf_url, delivered=True)


def _step(name: str, func, *args):
    try:
        return func(*args)
    except CollaboratorError:
        raise
    except Exception as e:
        raise CollaboratorError(f"{name} failed: {e}", step=name) from e


def _phone_from_identity(identity: str) -> str:
    return identity.replace("whatsapp:", "")
