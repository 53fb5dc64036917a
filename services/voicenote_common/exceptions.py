"""Exceptions shared by every service."""


class StorageDownloadError(Exception):
    """Raised when reading stored media fails."""

    def __init__(self, location: str, cause: Exception | None = None):
        self.location = location
        self.cause = cause
        super().__init__(f"Failed to read media '{location}' from storage")


class StorageUploadError(Exception):
    """Raised when storing downloaded media fails."""

    def __init__(self, media_id: str, cause: Exception | None = None):
        self.media_id = media_id
        self.cause = cause
        super().__init__(f"Failed to store media '{media_id}'")


class StorageReleaseError(Exception):
    """Raised when deleting stored media fails."""

    def __init__(self, location: str, cause: Exception | None = None):
        self.location = location
        self.cause = cause
        super().__init__(f"Failed to release media '{location}'")


class DeadlineExceededError(Exception):
    """Raised when an operation's time budget is spent before a call can start."""

    def __init__(self, operation: str, budget_seconds: float):
        self.operation = operation
        self.budget_seconds = budget_seconds
        super().__init__(
            f"Deadline of {budget_seconds:.1f}s exceeded before '{operation}'"
        )
