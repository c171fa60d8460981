from __future__ import annotations

from hotelbot.domain.entities.date_range import DateRange

GREETING_KEYWORDS = frozenset({"hola", "menu"})
RESERVATION_OPTION = "1"

MENU_TEXT = (
    "Hola 👋 Opciones:\n"
    "1️⃣ Consultar disponibilidad\n"
    "2️⃣ Info check-in\n"
    "3️⃣ WiFi y cocina\n"
    "4️⃣ Hablar con humano"
)

DATE_PROMPT_TEXT = "Por favor indícame tus fechas en el formato DD/MM/YYYY - DD/MM/YYYY"

INVALID_FORMAT_TEXT = "Formato inválido. Ejemplo: 20/10/2025 - 23/10/2025"

FALLBACK_TEXT = "No entendí 🙏 escribe *hola* para ver el menú."

PIPELINE_FAILURE_TEXT = (
    "Lo sentimos, hubo un problema al confirmar tu reserva. "
    "Nuestro equipo se pondrá en contacto contigo."
)

# Static answers for the remaining menu options.
OPTION_REPLIES = {
    "2": "🕒 Check-in a partir de las 15:00 y check-out hasta las 11:00. Al llegar muestra tu código QR en recepción.",
    "3": "📶 WiFi: red *Huespedes*, la contraseña está en tu habitación. La cocina compartida está abierta de 7:00 a 22:00.",
    "4": "👤 Te pondremos en contacto con una persona de nuestro equipo en breve.",
}


def build_unavailable_text(date_range: DateRange) -> str:
    return f"😔 No disponible del {date_range.start} al {date_range.end}."


def build_confirmation_text(booking_id: str, date_range: DateRange) -> str:
    return (
        "✅ Reserva confirmada\n"
        f"ID: {booking_id}\n"
        f"Fechas: {date_range.start} a {date_range.end}\n"
        "Aquí tienes tu confirmación en PDF:"
    )


def build_code_payload(booking_id: str, date_range: DateRange, room_id: str) -> str:
    return f"Reserva ID: {booking_id}\nCheck-in: {date_range.start} - {date_range.end}\nRoom: {room_id}"


def normalize(text: str) -> str:
    return (text or "").strip().lower()
