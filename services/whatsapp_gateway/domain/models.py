"""Domain models for the WhatsApp gateway."""

from pydantic import BaseModel, Field

AUDIO_KIND = "audio"


class AudioAttachment(BaseModel):
    id: str | None = None
    mime_type: str | None = None


class WebhookMessage(BaseModel):
    sender_id: str = Field(alias="from")
    id: str
    type: str
    audio: AudioAttachment | None = None


class ChangeValue(BaseModel):
    messages: list[WebhookMessage] = []


class Change(BaseModel):
    value: ChangeValue = ChangeValue()


class Entry(BaseModel):
    changes: list[Change] = []


class WebhookPayload(BaseModel):
    """
    Envelope of a WhatsApp Cloud API webhook delivery.

    Only the fields needed to route voice messages are modelled; status
    updates and other change kinds simply carry no messages.
    """

    entry: list[Entry] = []

    def events(self) -> list["InboundEvent"]:
        """Flattens entry -> changes -> messages into events, in delivery order."""
        return [
            InboundEvent.from_message(message)
            for entry in self.entry
            for change in entry.changes
            for message in change.value.messages
        ]


class InboundEvent(BaseModel, frozen=True):
    """One message from a delivery, reduced to what the pipeline needs."""

    sender_id: str
    message_id: str
    kind: str
    media_id: str | None = None
    mime_type: str | None = None

    @classmethod
    def from_message(cls, message: WebhookMessage) -> "InboundEvent":
        audio = message.audio if message.type == AUDIO_KIND else None
        return cls(
            sender_id=message.sender_id,
            message_id=message.id,
            kind=message.type,
            media_id=audio.id if audio else None,
            mime_type=audio.mime_type if audio else None,
        )

    @property
    def actionable(self) -> bool:
        """Only audio messages that carry a media id are processed."""
        return self.kind == AUDIO_KIND and bool(self.media_id)


class MediaMetadata(BaseModel, frozen=True):
    """Short-lived download location returned by the media endpoint."""

    url: str
    mime_type: str | None = None


class DeliveryReport(BaseModel):
    """Outcome of one webhook delivery, returned with the acknowledgment."""

    audio_messages: int = 0
    succeeded: int = 0
    failed: int = 0
    undelivered_replies: int = 0
