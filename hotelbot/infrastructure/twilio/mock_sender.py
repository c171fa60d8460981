from __future__ import annotations

import logging

from hotelbot.application.ports.messaging import MessagingSenderPort


class MockMessagingSender(MessagingSenderPort):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str | None]] = []
        self._logger = logging.getLogger(__name__)

    def send(self, to: str, body: str, media_url: str | None = None) -> str:
        self.sent.append((to, body, media_url))
        message_id = f"mock_message_{len(self.sent)}"
        self._logger.info(
            "Mock send to WhatsApp",
            extra={"identity": to, "message_id": message_id, "reply_text": body},
        )
        return message_id
