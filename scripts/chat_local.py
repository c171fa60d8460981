#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP, no Twilio).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps a stable conversation identity for the session
- Sends your typed messages through ConversationUseCase backed by in-memory
  stores, the real QR/PDF generators and a local artifact directory
- Prints the session step, the reply text and any media URL
"""

from __future__ import annotations

import os
import sys
import tempfile
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hotelbot.application.use_cases.availability import AvailabilityUseCase
from hotelbot.application.use_cases.confirm_booking import ConfirmBookingUseCase, GuestDefaults
from hotelbot.application.use_cases.conversation import ConversationUseCase
from hotelbot.domain.entities.session import ConversationStep
from hotelbot.infrastructure.artifacts.local_store import LocalArtifactStore
from hotelbot.infrastructure.documents.pdf_renderer import PdfConfirmationRenderer
from hotelbot.infrastructure.documents.qr_generator import QRCodeGenerator
from hotelbot.infrastructure.store.memory_booking_store import MemoryBookingStore
from hotelbot.infrastructure.store.memory_session_store import MemorySessionStore
from hotelbot.infrastructure.twilio.mock_sender import MockMessagingSender


def _print_header(identity: str, artifact_dir: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"identity: {identity}")
    print(f"artifacts: {artifact_dir}")
    print("Type your message and press Enter.")
    print("Commands: /new (new identity), /bookings, /quit, /help")
    print("-" * 60)


def main() -> None:
    identity = os.getenv("CHAT_IDENTITY", "whatsapp:+10000000001")
    artifact_dir = os.getenv("CHAT_ARTIFACT_DIR") or tempfile.mkdtemp(prefix="hotelbot_")

    sessions = MemorySessionStore()
    bookings = MemoryBookingStore()
    conversation = ConversationUseCase(
        sessions=sessions,
        availability=AvailabilityUseCase(store=bookings),
        confirm_booking=ConfirmBookingUseCase(
            bookings=bookings,
            code_generator=QRCodeGenerator(),
            renderer=PdfConfirmationRenderer(),
            artifacts=LocalArtifactStore(directory=artifact_dir, base_url=Path(artifact_dir).as_uri()),
            sender=MockMessagingSender(),
            defaults=GuestDefaults(guest_name="Huésped Local", room_id="1", party_size=1, origin="local"),
        ),
        room_id="1",
    )
    _print_header(identity, artifact_dir)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new  -> start a new identity (fresh session)")
            print("  /bookings -> list bookings made in this run")
            print("  /quit -> exit")
            continue
        if cmd == "/new":
            identity = f"whatsapp:+1{int(time.time())}"
            print(f"New identity: {identity}")
            continue
        if cmd == "/bookings":
            for booking in bookings.all():
                print(
                    f"{booking.id} room={booking.room_id} "
                    f"{booking.date_range.start}..{booking.date_range.end} {booking.artifacts_status}"
                )
            continue

        reply = conversation.handle(identity, user_text)
        session = sessions.get(identity)
        step = session.step if session else ConversationStep.IDLE

        print("\n--- Reply ---")
        print(reply.text)
        if reply.media_url:
            print(f"media: {reply.media_url}")
        print(f"(step: {step.value})")


if __name__ == "__main__":
    main()
