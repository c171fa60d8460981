from dataclasses import dataclass


@dataclass(frozen=True)
class ChatReply:
    text: str
    media_url: str | None = None
    delivered: bool = False  # True when the reply already went out through the sender
