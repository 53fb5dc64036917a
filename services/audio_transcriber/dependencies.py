"""Dependency injection configuration for the audio-transcriber service."""

from pathlib import Path

import assemblyai as aai
from fastapi import Request
from google import genai
from voicenote_common import setup_logging
from voicenote_common.infrastructure import build_media_storage

from audio_transcriber.config import AppConfig
from audio_transcriber.handlers import TranscriptionHandler
from audio_transcriber.infrastructure import AssemblyAITranscriber, GeminiTranscriber
from audio_transcriber.infrastructure.interfaces import TranscriptionService

logger = setup_logging()


def build_transcription_service(config: AppConfig) -> TranscriptionService:
    """Creates the speech-to-text backend selected by configuration."""
    if config.backend == "assemblyai":
        aai.settings.api_key = config.assemblyai.api_key
        return AssemblyAITranscriber(aai.Transcriber())

    prompt_path = Path(__file__).parent / config.gemini.prompt_path
    prompt = prompt_path.read_text(encoding="utf-8").strip()
    client = genai.Client(api_key=config.gemini.api_key)
    return GeminiTranscriber(client, config.gemini.model_name, prompt)


def build_handler(config: AppConfig) -> TranscriptionHandler:
    """Composition root: wires storage and the transcription backend once at startup."""
    storage = build_media_storage(config.storage)
    service = build_transcription_service(config)
    logger.info(
        "Audio transcriber ready",
        extra={"backend": config.backend, "storage": config.storage.backend},
    )
    return TranscriptionHandler(storage, service)


def get_handler(request: Request) -> TranscriptionHandler:
    """Returns the handler created at startup."""
    return request.app.state.handler
