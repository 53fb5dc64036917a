"""FastAPI application factory."""

from fastapi import FastAPI

from audio_transcriber.handlers import TranscriptionHandler
from audio_transcriber.routes import transcriptions_router


def create_app(handler: TranscriptionHandler) -> FastAPI:
    app = FastAPI(title="Audio Transcriber")
    app.state.handler = handler
    app.include_router(transcriptions_router)
    return app
