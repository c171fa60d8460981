from __future__ import annotations

import logging

from hotelbot.application.ports.messaging import MessagingSenderPort


class SendReplyUseCase:
    def __init__(self, sender: MessagingSenderPort, auto_reply_enabled: bool) -> None:
        self._sender = sender
        self._auto_reply_enabled = auto_reply_enabled
        self._logger = logging.getLogger(__name__)

    def execute(self, recipient: str, text: str, media_url: str | None = None) -> bool:
        """Send a reply. Returns True if actually sent, False if skipped."""
        if not self._auto_reply_enabled:
            self._logger.info("WOULD_SEND_REPLY", extra={"identity": recipient, "reply_text": text})
            self._logger.info("AUTO_REPLY_ENABLED=false -> skipping send")
            return False
        self._sender.send(recipient, text, media_url)
        return True
