"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field
from voicenote_common import HttpClientConfig, StorageConfig, load_storage_config


class WhatsAppConfig(BaseModel, frozen=True):
    """WhatsApp Cloud API credentials and endpoint."""

    verify_token: str
    app_secret: str
    api_token: str
    phone_number_id: str
    graph_api_url: str = "https://graph.facebook.com"
    graph_api_version: str = "v19.0"


class TimeoutConfig(BaseModel, frozen=True):
    """Per-call and per-event time budgets, in seconds."""

    connect: float = Field(default=5.0, gt=0)
    media: float = Field(default=30.0, gt=0)
    orchestrator: float = Field(default=60.0, gt=0)
    reply: float = Field(default=15.0, gt=0)
    event: float = Field(default=90.0, gt=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    port: int = 8080
    whatsapp: WhatsAppConfig
    orchestrator_url: str
    timeouts: TimeoutConfig = TimeoutConfig()
    storage: StorageConfig

    def http_config(self, read_timeout: float) -> HttpClientConfig:
        return HttpClientConfig(
            connect_timeout=self.timeouts.connect, read_timeout=read_timeout
        )


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        port=int(os.getenv("PORT", "8080")),
        whatsapp=WhatsAppConfig(
            verify_token=os.getenv("WHATSAPP_VERIFY_TOKEN", ""),
            app_secret=os.getenv("WHATSAPP_APP_SECRET", ""),
            api_token=os.getenv("WHATSAPP_API_TOKEN", ""),
            phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
            graph_api_url=os.getenv("WHATSAPP_GRAPH_API_URL", "https://graph.facebook.com"),
            graph_api_version=os.getenv("WHATSAPP_GRAPH_API_VERSION", "v19.0"),
        ),
        orchestrator_url=os.getenv("ORCHESTRATOR_URL", "http://orchestrator:8081"),
        timeouts=TimeoutConfig(
            connect=float(os.getenv("CONNECT_TIMEOUT_SECONDS", "5")),
            media=float(os.getenv("MEDIA_TIMEOUT_SECONDS", "30")),
            orchestrator=float(os.getenv("ORCHESTRATOR_TIMEOUT_SECONDS", "60")),
            reply=float(os.getenv("REPLY_TIMEOUT_SECONDS", "15")),
            event=float(os.getenv("EVENT_TIMEOUT_SECONDS", "90")),
        ),
        storage=load_storage_config(),
    )
