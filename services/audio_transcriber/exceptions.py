"""Custom exceptions for the audio-transcriber service."""


class TranscriptionError(Exception):
    """Raised when the speech-to-text backend fails or returns no text."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Transcription failed: {reason}")
