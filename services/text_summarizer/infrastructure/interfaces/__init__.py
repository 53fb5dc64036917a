"""Infrastructure interface exports."""

from text_summarizer.infrastructure.interfaces.llm_service import LLMService

__all__ = ["LLMService"]
