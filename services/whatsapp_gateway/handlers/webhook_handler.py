"""Handler for webhook deliveries."""

import time
from collections.abc import Callable

from voicenote_common import (
    Deadline,
    DeadlineExceededError,
    MediaHandle,
    StorageReleaseError,
    StorageUploadError,
    setup_logging,
)
from voicenote_common.infrastructure import MediaStorage
from voicenote_common.models import DEFAULT_AUDIO_MIME_TYPE

from whatsapp_gateway.config import TimeoutConfig
from whatsapp_gateway.domain import DeliveryReport, InboundEvent, WebhookPayload
from whatsapp_gateway.exceptions import (
    MediaFetchError,
    OrchestrationError,
    OrchestratorUnavailableError,
    ReplyDeliveryError,
)
from whatsapp_gateway.infrastructure.interfaces import (
    MessagingClient,
    OrchestratorClient,
)

logger = setup_logging()

DOWNLOAD_FAILED_NOTICE = "Sorry, failed to download your audio."
PROCESSING_FAILED_NOTICE = "Sorry, failed to process your audio."


class WebhookHandler:
    """Turns each voice message of a delivery into exactly one reply."""

    def __init__(
        self,
        messaging: MessagingClient,
        orchestrator: OrchestratorClient,
        storage: MediaStorage,
        timeouts: TimeoutConfig,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._messaging = messaging
        self._orchestrator = orchestrator
        self._storage = storage
        self._timeouts = timeouts
        self._clock = clock

    def handle_delivery(self, payload: WebhookPayload) -> DeliveryReport:
        """
        Processes every audio message of a delivery, one after another.

        A failing message gets a failure notice and never stops the remaining
        messages. Non-audio messages are skipped.

        Args:
            payload: The authenticated, parsed webhook body.

        Returns:
            DeliveryReport with per-outcome counts.
        """
        events = [event for event in payload.events() if event.actionable]
        report = DeliveryReport(audio_messages=len(events))

        for event in events:
            try:
                reply, succeeded = self._process_event(event)
            except Exception:
                logger.exception(
                    "Unexpected error while processing voice message",
                    extra={"message_id": event.message_id, "media_id": event.media_id},
                )
                reply, succeeded = PROCESSING_FAILED_NOTICE, False

            if succeeded:
                report.succeeded += 1
            else:
                report.failed += 1
            if not self._reply(event, reply):
                report.undelivered_replies += 1

        logger.info("Delivery processed", extra=report.model_dump())
        return report

    def _process_event(self, event: InboundEvent) -> tuple[str, bool]:
        """Returns the reply text for one event and whether the pipeline succeeded."""
        logger.info(
            "Received audio message",
            extra={
                "sender_id": event.sender_id,
                "message_id": event.message_id,
                "media_id": event.media_id,
            },
        )
        deadline = Deadline(self._timeouts.event, clock=self._clock)

        try:
            media = self._fetch_media(event, deadline)
        except (MediaFetchError, DeadlineExceededError):
            logger.exception(
                "Failed to download media", extra={"media_id": event.media_id}
            )
            return DOWNLOAD_FAILED_NOTICE, False

        try:
            summary = self._orchestrate(event, media, deadline)
        except (OrchestrationError, DeadlineExceededError):
            logger.exception(
                "Orchestrator error", extra={"media_id": event.media_id}
            )
            return PROCESSING_FAILED_NOTICE, False

        return summary, True

    def _fetch_media(self, event: InboundEvent, deadline: Deadline) -> MediaHandle:
        """Resolves, downloads and stores the audio of one event."""
        metadata = self._messaging.get_media_metadata(
            event.media_id, timeout=deadline.timeout(self._timeouts.media, "resolve media")
        )
        data = self._messaging.download_media(
            event.media_id,
            metadata.url,
            timeout=deadline.timeout(self._timeouts.media, "download media"),
        )
        mime_type = metadata.mime_type or event.mime_type or DEFAULT_AUDIO_MIME_TYPE
        try:
            return self._storage.store(event.media_id, data, mime_type)
        except StorageUploadError as e:
            raise MediaFetchError(event.media_id, "store", e) from e

    def _orchestrate(
        self, event: InboundEvent, media: MediaHandle, deadline: Deadline
    ) -> str:
        """Hands the media over to the orchestrator and waits for the summary."""
        try:
            timeout = deadline.timeout(self._timeouts.orchestrator, "orchestration")
            return self._orchestrator.process(event, media, timeout=timeout)
        except (OrchestratorUnavailableError, DeadlineExceededError):
            # The pipeline never started, so the media is still ours.
            self._release(media)
            raise

    def _reply(self, event: InboundEvent, text: str) -> bool:
        """Sends a reply; failures are logged and dropped."""
        try:
            self._messaging.send_text(
                event.sender_id, text, timeout=self._timeouts.reply
            )
            return True
        except ReplyDeliveryError:
            logger.exception(
                "Failed to send reply",
                extra={"sender_id": event.sender_id, "message_id": event.message_id},
            )
            return False

    def _release(self, media: MediaHandle) -> None:
        try:
            self._storage.release(media)
        except StorageReleaseError:
            logger.exception(
                "Failed to release media", extra={"location": media.location}
            )
