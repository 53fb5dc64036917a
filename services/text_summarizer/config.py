"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, Field


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    system_prompt_path: Path = Path("prompts/summary.txt")
    max_words: int = Field(default=150, gt=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    port: int = 8083
    gemini: GeminiConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        port=int(os.getenv("PORT", "8083")),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            max_words=int(os.getenv("SUMMARY_MAX_WORDS", "150")),
        ),
    )
