from __future__ import annotations

import logging
import time
from typing import Callable

from hotelbot.application.exceptions import DateRangeParseError
from hotelbot.application.ports.free_text_responder import FreeTextResponderPort
from hotelbot.application.ports.session_store import SessionStorePort
from hotelbot.application.use_cases.availability import AvailabilityUseCase
from hotelbot.application.use_cases.confirm_booking import ConfirmBookingUseCase
from hotelbot.application.utils.date_parser import parse_date_range
from hotelbot.application.utils.replies import (
    DATE_PROMPT_TEXT,
    FALLBACK_TEXT,
    GREETING_KEYWORDS,
    INVALID_FORMAT_TEXT,
    MENU_TEXT,
    OPTION_REPLIES,
    PIPELINE_FAILURE_TEXT,
    RESERVATION_OPTION,
    build_unavailable_text,
    normalize,
)
from hotelbot.domain.entities.reply import ChatReply
from hotelbot.domain.entities.session import ConversationStep, Session


class ConversationUseCase:
    """
    Per-identity conversation state machine.

    IDLE                + "hola"/"menu"      -> menu, IDLE
    IDLE                + "1"                -> date prompt, AWAITING_DATE_RANGE
    IDLE                + "2"/"3"/"4"        -> static answer, IDLE
    IDLE                + anything else      -> fallback, IDLE
    AWAITING_DATE_RANGE + date range         -> availability + confirmation, IDLE
    AWAITING_DATE_RANGE + anything else      -> format error, AWAITING_DATE_RANGE
    """

    def __init__(
        self,
        sessions: SessionStorePort,
        availability: AvailabilityUseCase,
        confirm_booking: ConfirmBookingUseCase,
        room_id: str,
        responder: FreeTextResponderPort | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._sessions = sessions
        self._availability = availability
        self._confirm_booking = confirm_booking
        self._room_id = room_id
        self._responder = responder
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def handle(self, identity: str, raw_text: str) -> ChatReply:
        with self._sessions.lock(identity):
            session = self._sessions.get(identity)
            step = session.step if session else ConversationStep.IDLE
            self._logger.info("Turn started", extra={"identity": identity, "step": step.value})

            if step is ConversationStep.AWAITING_DATE_RANGE:
                return self._handle_date_range(identity, raw_text)
            return self._handle_idle(identity, raw_text)

    def _handle_idle(self, identity: str, raw_text: str) -> ChatReply:
        text = normalize(raw_text)

        if text == RESERVATION_OPTION:
            self._sessions.put(
                identity, Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=self._clock())
            )
            return ChatReply(text=DATE_PROMPT_TEXT)

        if text in GREETING_KEYWORDS:
            return ChatReply(text=MENU_TEXT)

        if text in OPTION_REPLIES:
            return ChatReply(text=OPTION_REPLIES[text])

        return ChatReply(text=self._fallback(identity, raw_text))

    def _handle_date_range(self, identity: str, raw_text: str) -> ChatReply:
        try:
            date_range = parse_date_range(raw_text.strip())
        except DateRangeParseError as e:
            self._logger.info("Date range rejected", extra={"identity": identity, "reason": e.reason})
            # Still waiting; refresh so the TTL counts from the last attempt.
            self._sessions.put(
                identity, Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=self._clock())
            )
            return ChatReply(text=INVALID_FORMAT_TEXT)

        try:
            try:
                result = self._availability.check(self._room_id, date_range)
            except Exception as e:
                self._logger.error("Availability check failed", extra={"identity": identity, "error": str(e)})
                return ChatReply(text=PIPELINE_FAILURE_TEXT)
            if not result.available:
                return ChatReply(text=build_unavailable_text(date_range))
            return self._confirm_booking.execute(identity, date_range)
        finally:
            self._sessions.delete(identity)

    def _fallback(self, identity: str, raw_text: str) -> str:
        if self._responder is None:
            return FALLBACK_TEXT
        try:
            answer = self._responder.reply(raw_text)
        except Exception as e:
            self._logger.warning("Free-text responder failed", extra={"identity": identity, "error": str(e)})
            return FALLBACK_TEXT
        return answer.strip() or FALLBACK_TEXT
