"""Gemini implementation of the TranscriptionService interface."""

from google import genai
from google.genai import types
from voicenote_common import setup_logging

from audio_transcriber.exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


class GeminiTranscriber(TranscriptionService):
    """Transcribes audio by sending it inline to a Gemini model with a fixed prompt."""

    def __init__(self, client: genai.Client, model_name: str, prompt: str):
        self._client = client
        self._model_name = model_name
        self._prompt = prompt

    def transcribe(self, audio_data: bytes, mime_type: str) -> str:
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=[
                    types.Part.from_bytes(data=audio_data, mime_type=mime_type),
                    self._prompt,
                ],
            )
        except Exception as e:
            logger.exception(
                "Gemini transcription call failed",
                extra={"model": self._model_name, "mime_type": mime_type},
            )
            raise TranscriptionError("model call failed", e) from e

        transcript = (response.text or "").strip()
        if not transcript:
            logger.error(
                "Gemini returned an empty transcript", extra={"model": self._model_name}
            )
            raise TranscriptionError("model returned an empty transcript")

        logger.info(
            "Audio transcription successful",
            extra={"model": self._model_name, "characters": len(transcript)},
        )
        return transcript
