"""FastAPI application factory."""

from fastapi import FastAPI

from orchestrator.handlers import VoiceMessageHandler
from orchestrator.routes import voice_messages_router


def create_app(handler: VoiceMessageHandler) -> FastAPI:
    app = FastAPI(title="Voice Message Orchestrator")
    app.state.handler = handler
    app.include_router(voice_messages_router)
    return app
