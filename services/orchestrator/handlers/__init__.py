from orchestrator.handlers.voice_message_handler import VoiceMessageHandler

__all__ = ["VoiceMessageHandler"]
