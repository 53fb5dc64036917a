"""Custom exceptions for the orchestrator service."""

from voicenote_common import FailureKind, PipelineFailure


class StageCallError(Exception):
    """Raised when a call to a transformation stage fails."""

    def __init__(
        self,
        stage: str,
        message_id: str,
        reason: str,
        cause: Exception | None = None,
    ):
        self.stage = stage
        self.message_id = message_id
        self.reason = reason
        self.cause = cause
        super().__init__(f"{stage} call for message '{message_id}' failed: {reason}")


class PipelineError(Exception):
    """Raised when a pipeline run ends in the failed state."""

    def __init__(self, failure: PipelineFailure):
        self.failure = failure
        super().__init__(
            f"Pipeline for message '{failure.message_id}' failed "
            f"({failure.kind.value}): {failure.message}"
        )

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


class InvalidTransitionError(Exception):
    """Raised when a pipeline run is moved out of order."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move pipeline from '{current}' to '{target}'")
