from dataclasses import dataclass


@dataclass(frozen=True)
class InboundMessage:
    message_id: str
    identity: str
    text: str
    platform: str
