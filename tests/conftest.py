from __future__ import annotations

import pytest

from hotelbot.application.ports.artifact_store import ArtifactStorePort
from hotelbot.application.ports.code_generator import CodeGeneratorPort
from hotelbot.application.ports.document_renderer import DocumentRendererPort
from hotelbot.application.use_cases.availability import AvailabilityUseCase
from hotelbot.application.use_cases.confirm_booking import ConfirmBookingUseCase, GuestDefaults
from hotelbot.application.use_cases.conversation import ConversationUseCase
from hotelbot.domain.entities.booking import BookingFacts
from hotelbot.infrastructure.store.memory_booking_store import MemoryBookingStore
from hotelbot.infrastructure.store.memory_session_store import MemorySessionStore
from hotelbot.infrastructure.twilio.mock_sender import MockMessagingSender


class Clock:
    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeCodeGenerator(CodeGeneratorPort):
    def __init__(self, calls: list[str]) -> None:
        self.payloads: list[str] = []
        self._calls = calls

    def encode(self, payload: str) -> bytes:
        self._calls.append("encode")
        self.payloads.append(payload)
        return b"PNG:" + payload.encode("utf-8")


class FakeRenderer(DocumentRendererPort):
    def __init__(self, calls: list[str]) -> None:
        self.rendered: list[tuple[BookingFacts, bytes]] = []
        self._calls = calls

    def render(self, facts: BookingFacts, code_image: bytes) -> bytes:
        self._calls.append("render")
        self.rendered.append((facts, code_image))
        return b"PDF:" + facts.booking_id.encode("utf-8")


class FakeArtifactStore(ArtifactStorePort):
    def __init__(self, calls: list[str]) -> None:
        self.files: dict[str, bytes] = {}
        self._calls = calls

    def put(self, name: str, content: bytes) -> str:
        self._calls.append(f"put:{name.rsplit('.', 1)[-1]}")
        self.files[name] = content
        return f"https://files.example.com/qr/{name}"


class RecordingSender(MockMessagingSender):
    def __init__(self, calls: list[str]) -> None:
        super().__init__()
        self._calls = calls

    def send(self, to: str, body: str, media_url: str | None = None) -> str:
        self._calls.append("send")
        return super().send(to, body, media_url)


class RecordingBookingStore(MemoryBookingStore):
    def __init__(self, calls: list[str]) -> None:
        super().__init__()
        self._calls = calls

    def create_if_available(self, draft):
        self._calls.append("create")
        return super().create_if_available(draft)


class Boom(RuntimeError):
    pass


@pytest.fixture
def make_failing(monkeypatch):
    """Make obj.method raise Boom for the rest of the test."""

    def _make_failing(obj, method: str) -> None:
        def _raise(*args, **kwargs):
            raise Boom(f"{method} exploded")

        monkeypatch.setattr(obj, method, _raise)

    return _make_failing


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def sessions(clock) -> MemorySessionStore:
    return MemorySessionStore(ttl_seconds=1800, clock=clock)


@pytest.fixture
def bookings(calls) -> RecordingBookingStore:
    return RecordingBookingStore(calls)


@pytest.fixture
def code_generator(calls) -> FakeCodeGenerator:
    return FakeCodeGenerator(calls)


@pytest.fixture
def renderer(calls) -> FakeRenderer:
    return FakeRenderer(calls)


@pytest.fixture
def artifacts(calls) -> FakeArtifactStore:
    return FakeArtifactStore(calls)


@pytest.fixture
def sender(calls) -> RecordingSender:
    return RecordingSender(calls)


@pytest.fixture
def defaults() -> GuestDefaults:
    return GuestDefaults(guest_name="Huésped WhatsApp", room_id="1", party_size=1, origin="WhatsApp")


@pytest.fixture
def confirm_booking(bookings, code_generator, renderer, artifacts, sender, defaults) -> ConfirmBookingUseCase:
    return ConfirmBookingUseCase(
        bookings=bookings,
        code_generator=code_generator,
        renderer=renderer,
        artifacts=artifacts,
        sender=sender,
        defaults=defaults,
    )


@pytest.fixture
def conversation(sessions, bookings, confirm_booking, clock) -> ConversationUseCase:
    return ConversationUseCase(
        sessions=sessions,
        availability=AvailabilityUseCase(store=bookings),
        confirm_booking=confirm_booking,
        room_id="1",
        clock=clock,
    )
