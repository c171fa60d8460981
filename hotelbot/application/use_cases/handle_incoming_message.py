from __future__ import annotations

import logging

from hotelbot.application.ports.session_store import SessionStorePort
from hotelbot.application.use_cases.conversation import ConversationUseCase
from hotelbot.application.use_cases.send_reply import SendReplyUseCase
from hotelbot.domain.entities.message import InboundMessage
from hotelbot.domain.entities.reply import ChatReply


class HandleIncomingMessageUseCase:
    def __init__(
        self,
        sessions: SessionStorePort,
        conversation: ConversationUseCase,
        send_reply: SendReplyUseCase,
    ) -> None:
        self._sessions = sessions
        self._conversation = conversation
        self._send_reply = send_reply
        self._logger = logging.getLogger(__name__)

    def handle(self, message: InboundMessage) -> ChatReply | None:
        try:
            if not self._sessions.claim(message.message_id):
                self._logger.info("Duplicate message ignored", extra={"message_id": message.message_id})
                return None

            reply = self._conversation.handle(message.identity, message.text)

            if not reply.delivered and reply.text.strip():
                self._send_reply.execute(message.identity, reply.text, reply.media_url)

            self._logger.info(
                "Message handled",
                extra={"message_id": message.message_id, "identity": message.identity, "reply_text": reply.text},
            )
            return reply
        except Exception as e:
            self._logger.exception(
                "Error handling message",
                extra={"message_id": message.message_id, "identity": message.identity, "error": str(e)},
            )
            return None
