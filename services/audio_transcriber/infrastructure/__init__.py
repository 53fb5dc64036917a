"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .gemini_transcriber import GeminiTranscriber

__all__ = ["AssemblyAITranscriber", "GeminiTranscriber"]
