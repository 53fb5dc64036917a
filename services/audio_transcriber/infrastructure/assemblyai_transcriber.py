"""AssemblyAI implementation of the TranscriptionService interface."""

import mimetypes
import tempfile

import assemblyai as aai
from voicenote_common import setup_logging

from audio_transcriber.exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio_data: bytes, mime_type: str) -> str:
        """
        Transcribes audio data using AssemblyAI.

        AssemblyAI takes no instruction, so the fixed transcription prompt does
        not apply to this backend. The SDK reads from a path, so the audio is
        written to a temp file that is removed when the call returns.
        """
        suffix = mimetypes.guess_extension(mime_type.split(";")[0].strip()) or ".ogg"
        try:
            with tempfile.NamedTemporaryFile(suffix=suffix, delete=True) as temp_file:
                temp_file.write(audio_data)
                temp_file.flush()

                transcription = self._transcriber.transcribe(temp_file.name)
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError("AssemblyAI request failed", e) from e

        if transcription.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI reported an error", extra={"error": transcription.error}
            )
            raise TranscriptionError(
                "AssemblyAI reported an error", Exception(transcription.error)
            )

        transcript = (transcription.text or "").strip()
        if not transcript:
            raise TranscriptionError("AssemblyAI returned no text")

        logger.info(
            "Audio transcription successful", extra={"characters": len(transcript)}
        )
        return transcript
