"""HTTP implementations of the stage client interfaces."""

import httpx
from pydantic import BaseModel, ValidationError
from voicenote_common import (
    HttpClientConfig,
    SummarizationRequest,
    SummarizationResponse,
    TranscriptionRequest,
    TranscriptionResponse,
    setup_logging,
)
from voicenote_common.http import call_timeout

from orchestrator.exceptions import StageCallError

from .interfaces import SummarizationClient, TranscriptionClient

logger = setup_logging()


class _JsonStageClient:
    """Posts one JSON job to a stage over a shared, long-lived HTTP client."""

    def __init__(
        self, client: httpx.Client, config: HttpClientConfig, stage: str, path: str
    ):
        self._client = client
        self._config = config
        self._stage = stage
        self._path = path

    def _call(
        self,
        message_id: str,
        payload: BaseModel,
        response_model: type[BaseModel],
        timeout: float,
    ):
        try:
            response = self._client.post(
                self._path,
                json=payload.model_dump(mode="json"),
                timeout=call_timeout(self._config, timeout),
            )
        except httpx.TimeoutException as e:
            logger.exception(
                "Stage call timed out",
                extra={"stage": self._stage, "message_id": message_id, "timeout": timeout},
            )
            raise StageCallError(self._stage, message_id, "timed out", e) from e
        except httpx.HTTPError as e:
            logger.exception(
                "Stage unreachable",
                extra={"stage": self._stage, "message_id": message_id},
            )
            raise StageCallError(self._stage, message_id, "unreachable", e) from e

        if response.status_code != 200:
            logger.error(
                "Stage rejected the job",
                extra={
                    "stage": self._stage,
                    "message_id": message_id,
                    "status_code": response.status_code,
                    "body": response.text[:500],
                },
            )
            raise StageCallError(
                self._stage, message_id, f"status {response.status_code}"
            )

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.exception(
                "Stage returned an invalid body",
                extra={"stage": self._stage, "message_id": message_id},
            )
            raise StageCallError(self._stage, message_id, "invalid response", e) from e


class HttpTranscriptionClient(_JsonStageClient, TranscriptionClient):
    """Calls the audio-transcriber service."""

    def __init__(self, client: httpx.Client, config: HttpClientConfig):
        super().__init__(client, config, stage="transcription", path="/transcriptions")

    def transcribe(
        self, request: TranscriptionRequest, timeout: float
    ) -> TranscriptionResponse:
        return self._call(request.message_id, request, TranscriptionResponse, timeout)


class HttpSummarizationClient(_JsonStageClient, SummarizationClient):
    """Calls the text-summarizer service."""

    def __init__(self, client: httpx.Client, config: HttpClientConfig):
        super().__init__(client, config, stage="summarization", path="/summaries")

    def summarize(
        self, request: SummarizationRequest, timeout: float
    ) -> SummarizationResponse:
        return self._call(request.message_id, request, SummarizationResponse, timeout)
