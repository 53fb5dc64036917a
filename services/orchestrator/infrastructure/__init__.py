"""Infrastructure layer exports."""

from .http_stage_clients import HttpSummarizationClient, HttpTranscriptionClient

__all__ = ["HttpSummarizationClient", "HttpTranscriptionClient"]
