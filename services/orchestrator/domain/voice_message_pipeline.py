"""Core business logic: the transcribe-then-summarize pipeline."""

from voicenote_common import (
    Deadline,
    DeadlineExceededError,
    FailureKind,
    MediaHandle,
    ProcessVoiceMessageRequest,
    ProcessVoiceMessageResponse,
    StorageReleaseError,
    SummarizationRequest,
    TranscriptionRequest,
    setup_logging,
)
from voicenote_common.infrastructure import MediaStorage

from orchestrator.domain.pipeline_run import PipelineRun, PipelineState
from orchestrator.exceptions import PipelineError, StageCallError
from orchestrator.infrastructure.interfaces import (
    SummarizationClient,
    TranscriptionClient,
)

logger = setup_logging()


class VoiceMessagePipeline:
    """Runs transcription then summarization for one voice message."""

    def __init__(
        self,
        transcriber: TranscriptionClient,
        summarizer: SummarizationClient,
        storage: MediaStorage,
        stage_timeout: float,
    ):
        self._transcriber = transcriber
        self._summarizer = summarizer
        self._storage = storage
        self._stage_timeout = stage_timeout

    def run(
        self, request: ProcessVoiceMessageRequest, deadline: Deadline
    ) -> ProcessVoiceMessageResponse:
        """
        Runs the pipeline and releases the media handle on every exit path.

        The media id doubles as the correlation id passed to both stages.

        Args:
            request: The job handed over by the gateway.
            deadline: Budget shared by both stage calls.

        Returns:
            ProcessVoiceMessageResponse with the summary.

        Raises:
            PipelineError: If either stage fails, returns an empty result, or
                answers for a different correlation id.
        """
        run = PipelineRun(request.media_id)
        try:
            for step in (self._transcribe, self._summarize):
                step(run, request, deadline)
                if run.finished:
                    break
        finally:
            self._release(request.media)

        if run.state is PipelineState.FAILED:
            raise PipelineError(run.failure)

        return ProcessVoiceMessageResponse(message_id=run.message_id, summary=run.summary)

    def _transcribe(
        self, run: PipelineRun, request: ProcessVoiceMessageRequest, deadline: Deadline
    ) -> None:
        kind = FailureKind.TRANSCRIPTION_FAILED
        try:
            response = self._transcriber.transcribe(
                TranscriptionRequest(message_id=run.message_id, media=request.media),
                timeout=deadline.timeout(self._stage_timeout, "transcription"),
            )
        except (StageCallError, DeadlineExceededError) as e:
            self._fail(run, kind, str(e))
            return

        if response.message_id != run.message_id:
            self._fail(run, kind, f"answer for '{response.message_id}' received")
        elif not response.transcript.strip():
            self._fail(run, kind, "empty transcript")
        else:
            run.record_transcript(response.transcript)
            logger.info(
                "Transcript received",
                extra={"message_id": run.message_id, "characters": len(response.transcript)},
            )

    def _summarize(
        self, run: PipelineRun, request: ProcessVoiceMessageRequest, deadline: Deadline
    ) -> None:
        kind = FailureKind.SUMMARIZATION_FAILED
        transcript = run.transcript_for_summary()
        try:
            response = self._summarizer.summarize(
                SummarizationRequest(message_id=run.message_id, transcript=transcript),
                timeout=deadline.timeout(self._stage_timeout, "summarization"),
            )
        except (StageCallError, DeadlineExceededError) as e:
            self._fail(run, kind, str(e))
            return

        if response.message_id != run.message_id:
            self._fail(run, kind, f"answer for '{response.message_id}' received")
        elif not response.summary.strip():
            self._fail(run, kind, "empty summary")
        else:
            run.record_summary(response.summary)
            logger.info("Summary received", extra={"message_id": run.message_id})

    def _fail(self, run: PipelineRun, kind: FailureKind, reason: str) -> None:
        logger.error(
            "Pipeline failed",
            extra={"message_id": run.message_id, "kind": kind.value, "reason": reason},
        )
        run.fail(kind, reason)

    def _release(self, handle: MediaHandle) -> None:
        """Deletes the stored audio. A failed delete does not change the job outcome."""
        try:
            self._storage.release(handle)
        except StorageReleaseError:
            logger.exception(
                "Failed to release media",
                extra={"media_id": handle.media_id, "location": handle.location},
            )
