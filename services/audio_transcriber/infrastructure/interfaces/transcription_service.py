"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, mime_type: str) -> str:
        """
        Transcribes audio data into plain text.

        Args:
            audio_data: Raw audio file bytes.
            mime_type: MIME type hint for the audio encoding.

        Returns:
            The transcript text, never empty.

        Raises:
            TranscriptionError: If transcription fails or yields no text.
        """
        pass
