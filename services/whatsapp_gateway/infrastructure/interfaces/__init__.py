"""Infrastructure interface exports."""

from .messaging_client import MessagingClient
from .orchestrator_client import OrchestratorClient

__all__ = ["MessagingClient", "OrchestratorClient"]
