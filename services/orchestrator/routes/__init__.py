from orchestrator.routes.voice_messages import router as voice_messages_router

__all__ = ["voice_messages_router"]
