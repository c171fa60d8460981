from __future__ import annotations

import logging

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client

from hotelbot.application.ports.messaging import MessagingSenderPort

WHATSAPP_PREFIX = "whatsapp:"


class TwilioWhatsAppSender(MessagingSenderPort):
    def __init__(self, client: Client, from_number: str) -> None:
        self._client = client
        self._from = _as_whatsapp(from_number)
        self._logger = logging.getLogger(__name__)

    def send(self, to: str, body: str, media_url: str | None = None) -> str:
        kwargs = {"from_": self._from, "to": _as_whatsapp(to), "body": body}
        if media_url:
            kwargs["media_url"] = [media_url]
        try:
            message = self._client.messages.create(**kwargs)
        except TwilioRestException as e:
            self._logger.error(
                "Twilio send failed",
                extra={"identity": to, "error": f"{e.status} {e.code} {e.msg}"},
            )
            raise
        self._logger.info("WhatsApp message sent", extra={"identity": to, "message_id": message.sid})
        return message.sid


def _as_whatsapp(number: str) -> str:
    return number if number.startswith(WHATSAPP_PREFIX) else f"{WHATSAPP_PREFIX}{number}"
