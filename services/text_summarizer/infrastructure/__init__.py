"""Infrastructure layer exports."""

from text_summarizer.infrastructure.gemini_llm import GeminiLLMService

__all__ = ["GeminiLLMService"]
