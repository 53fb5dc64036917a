"""Abstract interface for the orchestrator service."""

from abc import ABC, abstractmethod

from voicenote_common import MediaHandle

from whatsapp_gateway.domain import InboundEvent


class OrchestratorClient(ABC):
    """Submits voice message jobs to the orchestrator."""

    @abstractmethod
    def process(self, event: InboundEvent, media: MediaHandle, timeout: float) -> str:
        """
        Runs one job and returns the summary text.

        Once the orchestrator has started the job, it owns the media handle and
        releases it.

        Raises:
            OrchestratorUnavailableError: If the job was never started, so the
                media handle is still the caller's.
            OrchestrationError: If the job failed or timed out.
        """
