from functools import lru_cache
import logging

from twilio.rest import Client

from hotelbot.application.ports.artifact_store import ArtifactStorePort
from hotelbot.application.ports.booking_store import BookingStorePort
from hotelbot.application.ports.free_text_responder import FreeTextResponderPort
from hotelbot.application.ports.messaging import MessagingSenderPort
from hotelbot.application.use_cases.availability import AvailabilityUseCase
from hotelbot.application.use_cases.confirm_booking import ConfirmBookingUseCase, GuestDefaults
from hotelbot.application.use_cases.conversation import ConversationUseCase
from hotelbot.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from hotelbot.application.use_cases.send_reply import SendReplyUseCase
from hotelbot.core.config import settings
from hotelbot.infrastructure.artifacts.ftp_store import FtpArtifactStore
from hotelbot.infrastructure.artifacts.local_store import LocalArtifactStore
from hotelbot.infrastructure.documents.pdf_renderer import PdfConfirmationRenderer
from hotelbot.infrastructure.documents.qr_generator import QRCodeGenerator
from hotelbot.infrastructure.llm.openai_responder import OpenAIResponder
from hotelbot.infrastructure.store.json_booking_store import JsonBookingStore
from hotelbot.infrastructure.store.memory_session_store import MemorySessionStore
from hotelbot.infrastructure.twilio.mock_sender import MockMessagingSender
from hotelbot.infrastructure.twilio.whatsapp_sender import TwilioWhatsAppSender


logger = logging.getLogger(__name__)


def _is_dev() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_session_store() -> MemorySessionStore:
    return MemorySessionStore(ttl_seconds=settings.SESSION_TTL_SECONDS)


@lru_cache
def get_booking_store() -> BookingStorePort:
    return JsonBookingStore(path=settings.BOOKING_STORE_PATH)


@lru_cache
def get_artifact_store() -> ArtifactStorePort:
    if settings.ARTIFACT_BACKEND.lower() == "ftp":
        return FtpArtifactStore(
            host=settings.FTP_HOST or "",
            user=settings.FTP_USER or "",
            password=settings.FTP_PASSWORD or "",
            base_url=settings.ARTIFACT_BASE_URL,
            directory=settings.FTP_DIR,
        )
    return LocalArtifactStore(directory=settings.ARTIFACT_DIR, base_url=settings.ARTIFACT_BASE_URL)


@lru_cache
def get_sender() -> MessagingSenderPort:
    logger.info(
        "TWILIO_ACCOUNT_SID present=%s AUTO_REPLY_ENABLED=%s ENV=%s",
        bool(settings.TWILIO_ACCOUNT_SID),
        settings.AUTO_REPLY_ENABLED,
        settings.ENV,
    )
    if not settings.AUTO_REPLY_ENABLED:
        logger.info("Using MockMessagingSender (AUTO_REPLY_ENABLED=false)")
        return MockMessagingSender()

    if not (settings.TWILIO_ACCOUNT_SID and settings.TWILIO_AUTH_TOKEN and settings.TWILIO_WHATSAPP_NUMBER):
        if _is_dev():
            logger.info("Using MockMessagingSender (Twilio credentials missing, ENV=dev/local)")
            return MockMessagingSender()
        raise ValueError("TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_WHATSAPP_NUMBER are required.")

    logger.info("Using real TwilioWhatsAppSender")
    client = Client(settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN)
    return TwilioWhatsAppSender(client=client, from_number=settings.TWILIO_WHATSAPP_NUMBER)


@lru_cache
def get_responder() -> FreeTextResponderPort | None:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAIResponder(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL_REPLY,
            temperature=settings.OPENAI_TEMPERATURE_REPLY,
            hotel_name=settings.HOTEL_NAME,
        )
    return None


def get_confirm_booking_use_case() -> ConfirmBookingUseCase:
    return ConfirmBookingUseCase(
        bookings=get_booking_store(),
        code_generator=QRCodeGenerator(),
        renderer=PdfConfirmationRenderer(hotel_name=settings.HOTEL_NAME),
        artifacts=get_artifact_store(),
        sender=get_sender(),
        defaults=GuestDefaults(
            guest_name=settings.DEFAULT_GUEST_NAME,
            room_id=settings.DEFAULT_ROOM_ID,
            party_size=settings.DEFAULT_PARTY_SIZE,
            origin=settings.BOOKING_ORIGIN,
        ),
    )


def get_conversation_use_case() -> ConversationUseCase:
    return ConversationUseCase(
        sessions=get_session_store(),
        availability=AvailabilityUseCase(store=get_booking_store()),
        confirm_booking=get_confirm_booking_use_case(),
        room_id=settings.DEFAULT_ROOM_ID,
        responder=get_responder(),
    )


def get_handle_incoming_message_use_case() -> HandleIncomingMessageUseCase:
    return HandleIncomingMessageUseCase(
        sessions=get_session_store(),
        conversation=get_conversation_use_case(),
        send_reply=SendReplyUseCase(sender=get_sender(), auto_reply_enabled=settings.AUTO_REPLY_ENABLED),
    )
