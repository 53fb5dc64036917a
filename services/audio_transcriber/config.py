"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from voicenote_common import StorageConfig, load_storage_config


class GeminiConfig(BaseModel, frozen=True):
    """Gemini transcription configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    prompt_path: Path = Path("prompts/transcription.txt")


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    port: int = 8082
    backend: Literal["gemini", "assemblyai"] = "gemini"
    storage: StorageConfig
    gemini: GeminiConfig
    assemblyai: AssemblyAIConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        port=int(os.getenv("PORT", "8082")),
        backend=os.getenv("TRANSCRIPTION_BACKEND", "gemini"),
        storage=load_storage_config(),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
    )
