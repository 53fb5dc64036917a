"""Custom exceptions for the whatsapp-gateway service."""


class MediaFetchError(Exception):
    """Raised when a voice message's audio cannot be retrieved or stored."""

    def __init__(self, media_id: str, step: str, cause: Exception | None = None):
        self.media_id = media_id
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to {step} media '{media_id}'")


class OrchestrationError(Exception):
    """Raised when the orchestrator does not return a summary."""

    def __init__(self, media_id: str, reason: str, cause: Exception | None = None):
        self.media_id = media_id
        self.reason = reason
        self.cause = cause
        super().__init__(f"Processing media '{media_id}' failed: {reason}")


class OrchestratorUnavailableError(OrchestrationError):
    """
    Raised when the orchestrator never started the job.

    Covers connection failures, requests that were never fully sent and 4xx
    rejections; in all of them the media is still the caller's to release.
    """


class ReplyDeliveryError(Exception):
    """Raised when an outbound WhatsApp message is not accepted."""

    def __init__(self, recipient_id: str, reason: str, cause: Exception | None = None):
        self.recipient_id = recipient_id
        self.reason = reason
        self.cause = cause
        super().__init__(f"Failed to send reply to '{recipient_id}': {reason}")
