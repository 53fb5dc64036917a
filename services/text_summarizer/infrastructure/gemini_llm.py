"""Gemini LLM service implementation."""

from google import genai
from voicenote_common import setup_logging

from text_summarizer.exceptions import LLMServiceError
from text_summarizer.infrastructure.interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str, system_prompt: str):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt

    def summarize(self, transcript: str) -> str:
        """
        Summarizes a transcript using Gemini with the summary system prompt.

        Args:
            transcript: The transcript text to summarize.

        Returns:
            Markdown summary with key points, action items and sentiment.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=f"TRANSCRIPT:\n{transcript}",
                config={"system_instruction": self._system_prompt},
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"model": self._model_name})
            raise LLMServiceError(f"Gemini summarization failed: {e}", cause=e) from e

        summary = (response.text or "").strip()
        if not summary:
            logger.error("Gemini returned an empty summary")
            raise LLMServiceError("Gemini returned an empty summary")

        logger.info("LLM summary completed", extra={"characters": len(summary)})
        return summary
