"""Dependency injection configuration for the text-summarizer service."""

from pathlib import Path

from fastapi import Request
from google import genai
from voicenote_common import setup_logging

from text_summarizer.config import AppConfig
from text_summarizer.handlers import SummarizationHandler
from text_summarizer.infrastructure import GeminiLLMService

logger = setup_logging()


def load_system_prompt(config: AppConfig) -> str:
    """Reads the summary prompt template and fills in the word limit."""
    prompt_path = Path(__file__).parent / config.gemini.system_prompt_path
    template = prompt_path.read_text(encoding="utf-8")
    return template.format(max_words=config.gemini.max_words).strip()


def build_handler(config: AppConfig) -> SummarizationHandler:
    """Composition root: creates the Gemini client once at startup."""
    client = genai.Client(api_key=config.gemini.api_key)
    llm = GeminiLLMService(client, config.gemini.model_name, load_system_prompt(config))
    logger.info("Text summarizer ready", extra={"model": config.gemini.model_name})
    return SummarizationHandler(llm)


def get_handler(request: Request) -> SummarizationHandler:
    """Returns the handler created at startup."""
    return request.app.state.handler
