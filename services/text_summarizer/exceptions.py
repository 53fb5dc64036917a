"""Custom exceptions for the text-summarizer service."""


class LLMServiceError(Exception):
    """Raised when the LLM service call fails or returns nothing usable."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class EmptyTranscriptError(Exception):
    """Raised when a summarization request carries no transcript text."""

    def __init__(self, message_id: str):
        self.message_id = message_id
        super().__init__(f"Transcript for message '{message_id}' is empty")
