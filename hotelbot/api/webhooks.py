from __future__ import annotations

import logging
from urllib.parse import parse_qsl

from fastapi import APIRouter, BackgroundTasks, Request, Response

from hotelbot.application.dto.twilio_event import TwilioWhatsAppEvent
from hotelbot.core.config import settings
from hotelbot.infrastructure.twilio.webhook_verify import verify_twilio_signature
from hotelbot.wiring.dependencies import get_handle_incoming_message_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/webhooks/whatsapp")
async def whatsapp_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
) -> Response:
    try:
        try:
            use_case = get_handle_incoming_message_use_case()
        except Exception as e:
            logger.exception("Failed to initialize use case", extra={"error": str(e)})
            return Response(status_code=500)

        body = await request.body()
        try:
            params = dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
        except UnicodeDecodeError:
            logger.exception("Failed to parse webhook body")
            return Response(status_code=400)

        signature = request.headers.get("X-Twilio-Signature")
        if not verify_twilio_signature(
            _signed_url(request), params, signature, settings.TWILIO_AUTH_TOKEN, settings.ENV
        ):
            return Response(status_code=403)

        event = TwilioWhatsAppEvent.model_validate(params)
        message = event.to_message()
        if message is None:
            logger.info("Webhook without sender or message id ignored")
            return Response(status_code=200)

        logger.info("Webhook received", extra={"message_id": message.message_id, "identity": message.identity})
        # Runs after the response is sent, outside the request's lifetime.
        background_tasks.add_task(use_case.handle, message)
        return Response(status_code=200)
    except Exception as e:
        logger.exception("Fatal error in webhook handler", extra={"error": str(e)})
        return Response(status_code=500)


def _signed_url(request: Request) -> str:
    if settings.PUBLIC_BASE_URL:
        return settings.PUBLIC_BASE_URL.rstrip("/") + request.url.path
    return str(request.url)
