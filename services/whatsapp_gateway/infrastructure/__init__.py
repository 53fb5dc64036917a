"""Infrastructure layer exports."""

from .orchestrator_http import HttpOrchestratorClient
from .whatsapp_client import WhatsAppCloudClient

__all__ = ["HttpOrchestratorClient", "WhatsAppCloudClient"]
