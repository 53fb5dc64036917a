"""Abstract interfaces for the transformation stages."""

from abc import ABC, abstractmethod

from voicenote_common import (
    SummarizationRequest,
    SummarizationResponse,
    TranscriptionRequest,
    TranscriptionResponse,
)


class TranscriptionClient(ABC):
    """Client for the transcription stage."""

    @abstractmethod
    def transcribe(
        self, request: TranscriptionRequest, timeout: float
    ) -> TranscriptionResponse:
        """
        Submits one transcription job and waits for its result.

        Args:
            request: The job, carrying the correlation id and media handle.
            timeout: Seconds to wait for the stage to answer.

        Raises:
            StageCallError: If the stage is unreachable, times out or rejects the job.
        """


class SummarizationClient(ABC):
    """Client for the summarization stage."""

    @abstractmethod
    def summarize(
        self, request: SummarizationRequest, timeout: float
    ) -> SummarizationResponse:
        """
        Submits one summarization job and waits for its result.

        Raises:
            StageCallError: If the stage is unreachable, times out or rejects the job.
        """
