from __future__ import annotations

import io

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from hotelbot.application.ports.document_renderer import DocumentRendererPort
from hotelbot.domain.entities.booking import BookingFacts

QR_SIZE = 150


class PdfConfirmationRenderer(DocumentRendererPort):
    def __init__(self, hotel_name: str = "Hotel") -> None:
        self._hotel_name = hotel_name

    def render(self, facts: BookingFacts, code_image: bytes) -> bytes:
        buffer = io.BytesIO()
        width, height = A4
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle(f"Reserva {facts.booking_id}")

        y = height - 72
        pdf.setFont("Helvetica-Bold", 20)
        pdf.drawCentredString(width / 2, y, "Confirmación de Reserva")
        y -= 20
        pdf.setFont("Helvetica", 11)
        pdf.drawCentredString(width / 2, y, self._hotel_name)

        y -= 40
        pdf.setFont("Helvetica", 12)
        for line in (
            f"ID de Reserva: {facts.booking_id}",
            f"Nombre: {facts.guest_name}",
            f"Fechas: {facts.date_range.start} a {facts.date_range.end}",
            f"Personas: {facts.party_size}",
            f"Habitación: {facts.room_id}",
        ):
            pdf.drawString(72, y, line)
            y -= 18

        y -= 18
        pdf.drawString(72, y, "Escanea este QR al llegar para tu check-in:")
        y -= QR_SIZE + 10
        pdf.drawImage(
            ImageReader(io.BytesIO(code_image)),
            (width - QR_SIZE) / 2,
            y,
            width=QR_SIZE,
            height=QR_SIZE,
            preserveAspectRatio=True,
        )

        pdf.showPage()
        pdf.save()
        return buffer.getvalue()
