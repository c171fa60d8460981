from __future__ import annotations

import tempfile
from pathlib import Path

from hotelbot.domain.entities.booking import BookingFacts
from hotelbot.domain.entities.date_range import DateRange
from hotelbot.infrastructure.artifacts.local_store import LocalArtifactStore
from hotelbot.infrastructure.documents.pdf_renderer import PdfConfirmationRenderer
from hotelbot.infrastructure.documents.qr_generator import QRCodeGenerator

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_qr_generator_produces_png():
    image = QRCodeGenerator().encode("Reserva ID: abc\nCheck-in: 2025-10-20 - 2025-10-23\nRoom: 1")
    assert image.startswith(PNG_MAGIC)


def test_pdf_renderer_embeds_code_image():
    code = QRCodeGenerator().encode("Reserva ID: abc")
    facts = BookingFacts(
        booking_id="abc",
        guest_name="Huésped WhatsApp",
        date_range=DateRange("2025-10-20", "2025-10-23"),
        party_size=1,
        room_id="1",
    )
    pdf = PdfConfirmationRenderer(hotel_name="Hotel Duomo").render(facts, code)
    assert pdf.startswith(b"%PDF")
    assert b"/Image" in pdf


def test_local_store_overwrites_and_returns_url():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = LocalArtifactStore(directory=tmpdir, base_url="https://files.example.com/qr/")

        url = store.put("reserva-abc.pdf", b"one")
        assert url == "https://files.example.com/qr/reserva-abc.pdf"
        store.put("reserva-abc.pdf", b"two")
        assert (Path(tmpdir) / "reserva-abc.pdf").read_bytes() == b"two"
        assert sorted(p.name for p in Path(tmpdir).iterdir()) == ["reserva-abc.pdf"]


def test_local_store_ignores_directory_components():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = LocalArtifactStore(directory=tmpdir, base_url="https://files.example.com")
        url = store.put("../escape.png", b"x")
        assert url == "https://files.example.com/escape.png"
        assert (Path(tmpdir) / "escape.png").exists()
