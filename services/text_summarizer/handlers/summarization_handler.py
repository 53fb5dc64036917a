"""Handler for summarization requests."""

from voicenote_common import SummarizationRequest, SummarizationResponse, setup_logging

from text_summarizer.exceptions import EmptyTranscriptError
from text_summarizer.infrastructure.interfaces import LLMService

logger = setup_logging()


class SummarizationHandler:
    """Condenses a transcript into a short structured summary."""

    def __init__(self, llm_service: LLMService):
        self._llm = llm_service

    def process(self, request: SummarizationRequest) -> SummarizationResponse:
        """
        Summarizes the request's transcript.

        Args:
            request: The summarization job with its correlation id.

        Returns:
            SummarizationResponse carrying the same correlation id.

        Raises:
            EmptyTranscriptError: If the transcript is blank.
            LLMServiceError: If the LLM fails or returns no text.
        """
        transcript = request.transcript.strip()
        if not transcript:
            raise EmptyTranscriptError(request.message_id)

        logger.info(
            "Processing summarization request",
            extra={"message_id": request.message_id, "characters": len(transcript)},
        )

        summary = self._llm.summarize(transcript)

        logger.info("Summarization completed", extra={"message_id": request.message_id})
        return SummarizationResponse(message_id=request.message_id, summary=summary)
