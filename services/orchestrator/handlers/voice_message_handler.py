"""Handler for voice message jobs."""

from voicenote_common import (
    Deadline,
    ProcessVoiceMessageRequest,
    ProcessVoiceMessageResponse,
    setup_logging,
)

from orchestrator.domain import VoiceMessagePipeline

logger = setup_logging()


class VoiceMessageHandler:
    """Runs one job through the pipeline under the pipeline deadline."""

    def __init__(self, pipeline: VoiceMessagePipeline, pipeline_timeout: float):
        self._pipeline = pipeline
        self._pipeline_timeout = pipeline_timeout

    def process(self, request: ProcessVoiceMessageRequest) -> ProcessVoiceMessageResponse:
        """
        Processes a voice message job.

        Raises:
            PipelineError: If the job fails at either stage.
        """
        logger.info(
            "Processing voice message",
            extra={
                "sender_id": request.sender_id,
                "media_id": request.media_id,
                "size": request.media.size,
            },
        )

        result = self._pipeline.run(request, Deadline(self._pipeline_timeout))

        logger.info("Voice message processed", extra={"media_id": request.media_id})
        return result
