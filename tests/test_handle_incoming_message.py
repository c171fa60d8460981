from __future__ import annotations

import threading

from hotelbot.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from hotelbot.application.use_cases.send_reply import SendReplyUseCase
from hotelbot.application.utils.replies import DATE_PROMPT_TEXT, MENU_TEXT
from hotelbot.domain.entities.message import InboundMessage
from hotelbot.infrastructure.twilio.mock_sender import MockMessagingSender

U1 = "whatsapp:+34600000001"


def _message(message_id: str, text: str) -> InboundMessage:
    return InboundMessage(message_id=message_id, identity=U1, text=text, platform="whatsapp")


def _use_case(sessions, conversation, outbox, auto_reply_enabled=True):
    return HandleIncomingMessageUseCase(
        sessions=sessions,
        conversation=conversation,
        send_reply=SendReplyUseCase(sender=outbox, auto_reply_enabled=auto_reply_enabled),
    )


def test_replies_are_sent_to_sender(sessions, conversation):
    outbox = MockMessagingSender()
    use_case = _use_case(sessions, conversation, outbox)

    use_case.handle(_message("SM1", "hola"))
    use_case.handle(_message("SM2", "1"))

    assert outbox.sent == [(U1, MENU_TEXT, None), (U1, DATE_PROMPT_TEXT, None)]


def test_redelivered_message_is_ignored(sessions, conversation):
    outbox = MockMessagingSender()
    use_case = _use_case(sessions, conversation, outbox)

    assert use_case.handle(_message("SM1", "1")) is not None
    assert use_case.handle(_message("SM1", "1")) is None
    assert len(outbox.sent) == 1


def test_confirmation_is_not_sent_twice(sessions, conversation, sender):
    outbox = MockMessagingSender()
    use_case = _use_case(sessions, conversation, outbox)

    use_case.handle(_message("SM1", "1"))
    reply = use_case.handle(_message("SM2", "20/10/2025 - 23/10/2025"))

    assert reply is not None and reply.delivered
    assert len(sender.sent) == 1
    assert [body for _, body, _ in outbox.sent] == [DATE_PROMPT_TEXT]


def test_auto_reply_disabled_only_logs(sessions, conversation):
    outbox = MockMessagingSender()
    use_case = _use_case(sessions, conversation, outbox, auto_reply_enabled=False)

    reply = use_case.handle(_message("SM1", "hola"))
    assert reply is not None and reply.text == MENU_TEXT
    assert outbox.sent == []


def test_send_failure_does_not_raise(sessions, conversation, make_failing):
    outbox = MockMessagingSender()
    make_failing(outbox, "send")
    use_case = _use_case(sessions, conversation, outbox)

    assert use_case.handle(_message("SM1", "hola")) is None


def test_simultaneous_redelivery_is_handled_once(sessions, conversation):
    outbox = MockMessagingSender()
    use_case = _use_case(sessions, conversation, outbox)
    message = _message("SM1", "hola")
    barrier = threading.Barrier(2)

    def run() -> None:
        barrier.wait(timeout=5)
        use_case.handle(message)

    threads = [threading.Thread(target=run) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outbox.sent == [(U1, MENU_TEXT, None)]
