"""Infrastructure interface exports."""

from .stage_clients import SummarizationClient, TranscriptionClient

__all__ = ["SummarizationClient", "TranscriptionClient"]
