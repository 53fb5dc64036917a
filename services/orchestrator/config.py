"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field
from voicenote_common import HttpClientConfig, StorageConfig, load_storage_config


class StageServiceConfig(BaseModel, frozen=True):
    """Address and client timeouts of one downstream stage."""

    url: str
    http: HttpClientConfig = HttpClientConfig(read_timeout=45.0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    port: int = 8081
    storage: StorageConfig
    transcriber: StageServiceConfig
    summarizer: StageServiceConfig
    stage_timeout_seconds: float = Field(default=45.0, gt=0)
    pipeline_timeout_seconds: float = Field(default=55.0, gt=0)


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    http = HttpClientConfig(
        connect_timeout=float(os.getenv("CONNECT_TIMEOUT_SECONDS", "5")),
        read_timeout=float(os.getenv("STAGE_TIMEOUT_SECONDS", "45")),
    )
    return AppConfig(
        port=int(os.getenv("PORT", "8081")),
        storage=load_storage_config(),
        transcriber=StageServiceConfig(
            url=os.getenv("AUDIO_TRANSCRIBER_URL", "http://audio-transcriber:8082"),
            http=http,
        ),
        summarizer=StageServiceConfig(
            url=os.getenv("TEXT_SUMMARIZER_URL", "http://text-summarizer:8083"),
            http=http,
        ),
        stage_timeout_seconds=float(os.getenv("STAGE_TIMEOUT_SECONDS", "45")),
        pipeline_timeout_seconds=float(os.getenv("PIPELINE_TIMEOUT_SECONDS", "55")),
    )
