"""Data contracts exchanged between the services."""

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_AUDIO_MIME_TYPE = "audio/ogg"


class MediaHandle(BaseModel, frozen=True):
    """
    Reference to audio bytes held in transient media storage.

    The handle is created by the gateway once media is downloaded and is
    released exactly once, by whoever owns it when the job ends.
    """

    media_id: str = Field(min_length=1)
    location: str = Field(min_length=1)
    mime_type: str = DEFAULT_AUDIO_MIME_TYPE
    size: int = Field(ge=0)


class TranscriptionRequest(BaseModel, frozen=True):
    message_id: str = Field(min_length=1)
    media: MediaHandle


class TranscriptionResponse(BaseModel, frozen=True):
    message_id: str
    transcript: str


class SummarizationRequest(BaseModel, frozen=True):
    message_id: str = Field(min_length=1)
    transcript: str


class SummarizationResponse(BaseModel, frozen=True):
    message_id: str
    summary: str


class ProcessVoiceMessageRequest(BaseModel, frozen=True):
    """Job submitted by the gateway to the orchestrator."""

    sender_id: str = Field(min_length=1)
    media_id: str = Field(min_length=1)
    media: MediaHandle


class ProcessVoiceMessageResponse(BaseModel, frozen=True):
    message_id: str
    summary: str


class FailureKind(str, Enum):
    """Classification of a failed pipeline run."""

    TRANSCRIPTION_FAILED = "transcription_failed"
    SUMMARIZATION_FAILED = "summarization_failed"


class PipelineFailure(BaseModel, frozen=True):
    """Error body returned by the orchestrator for a failed run."""

    kind: FailureKind
    message_id: str
    message: str
