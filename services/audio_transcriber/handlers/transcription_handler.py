"""Handler for transcription requests."""

from voicenote_common import TranscriptionRequest, TranscriptionResponse, setup_logging
from voicenote_common.infrastructure import MediaStorage

from audio_transcriber.infrastructure.interfaces import TranscriptionService

logger = setup_logging()


class TranscriptionHandler:
    """Turns the audio behind a media handle into a transcript."""

    def __init__(
        self, storage: MediaStorage, transcription_service: TranscriptionService
    ):
        self._storage = storage
        self._transcription_service = transcription_service

    def process(self, request: TranscriptionRequest) -> TranscriptionResponse:
        """
        Loads the referenced audio and transcribes it.

        The media handle is only read here. Releasing it is the orchestrator's
        job once the whole pipeline has finished.

        Args:
            request: The transcription job with its correlation id.

        Returns:
            TranscriptionResponse carrying the same correlation id.

        Raises:
            StorageDownloadError: If the audio cannot be read.
            TranscriptionError: If transcription fails or yields no text.
        """
        logger.info(
            "Processing transcription request",
            extra={
                "message_id": request.message_id,
                "location": request.media.location,
                "mime_type": request.media.mime_type,
            },
        )

        audio_data = self._storage.load(request.media)

        transcript = self._transcription_service.transcribe(
            audio_data, request.media.mime_type
        )

        logger.info(
            "Transcription completed", extra={"message_id": request.message_id}
        )
        return TranscriptionResponse(
            message_id=request.message_id, transcript=transcript
        )
