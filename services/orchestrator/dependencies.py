"""Dependency injection configuration for the orchestrator service."""

from fastapi import Request
from voicenote_common import setup_logging
from voicenote_common.http import build_http_client
from voicenote_common.infrastructure import build_media_storage

from orchestrator.config import AppConfig
from orchestrator.domain import VoiceMessagePipeline
from orchestrator.handlers import VoiceMessageHandler
from orchestrator.infrastructure import HttpSummarizationClient, HttpTranscriptionClient

logger = setup_logging()


def build_handler(config: AppConfig) -> VoiceMessageHandler:
    """Composition root: one HTTP client per stage, created once at startup."""
    transcriber = HttpTranscriptionClient(
        build_http_client(config.transcriber.http, base_url=config.transcriber.url),
        config.transcriber.http,
    )
    summarizer = HttpSummarizationClient(
        build_http_client(config.summarizer.http, base_url=config.summarizer.url),
        config.summarizer.http,
    )
    pipeline = VoiceMessagePipeline(
        transcriber,
        summarizer,
        build_media_storage(config.storage),
        stage_timeout=config.stage_timeout_seconds,
    )
    logger.info(
        "Orchestrator ready",
        extra={
            "transcriber_url": config.transcriber.url,
            "summarizer_url": config.summarizer.url,
        },
    )
    return VoiceMessageHandler(pipeline, config.pipeline_timeout_seconds)


def get_handler(request: Request) -> VoiceMessageHandler:
    """Returns the handler created at startup."""
    return request.app.state.handler
