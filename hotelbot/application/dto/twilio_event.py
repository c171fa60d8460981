from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hotelbot.domain.entities.message import InboundMessage


class TwilioWhatsAppEvent(BaseModel):
    """Form fields Twilio posts for an inbound WhatsApp message."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message_sid: str | None = Field(None, alias="MessageSid")
    from_: str | None = Field(None, alias="From")
    to: str | None = Field(None, alias="To")
    body: str | None = Field(None, alias="Body")

    def to_message(self) -> InboundMessage | None:
        if not (self.message_sid and self.from_):
            return None
        return InboundMessage(
            message_id=self.message_sid,
            identity=self.from_,
            text=(self.body or "").strip(),
            platform="whatsapp",
        )
