"""State machine for one voice message job."""

from enum import Enum

from voicenote_common import FailureKind, PipelineFailure

from orchestrator.exceptions import InvalidTransitionError


class PipelineState(str, Enum):
    FETCHED = "fetched"
    TRANSCRIBED = "transcribed"
    SUMMARIZED = "summarized"
    FAILED = "failed"


_TRANSITIONS: dict[PipelineState, frozenset[PipelineState]] = {
    PipelineState.FETCHED: frozenset({PipelineState.TRANSCRIBED, PipelineState.FAILED}),
    PipelineState.TRANSCRIBED: frozenset(
        {PipelineState.SUMMARIZED, PipelineState.FAILED}
    ),
    PipelineState.SUMMARIZED: frozenset(),
    PipelineState.FAILED: frozenset(),
}


class PipelineRun:
    """
    Tracks one job through fetched -> transcribed -> summarized.

    Transitions only go forward or into failed, and both end states are
    terminal. The transcript can only be taken for summarization while the run
    is in the transcribed state, so a failed transcription can never reach the
    summarization stage.
    """

    def __init__(self, message_id: str):
        self.message_id = message_id
        self.state = PipelineState.FETCHED
        self._transcript: str | None = None
        self._summary: str | None = None
        self._failure: PipelineFailure | None = None

    def record_transcript(self, transcript: str) -> None:
        if not transcript.strip():
            raise ValueError("A transcript must not be empty")
        self._move(PipelineState.TRANSCRIBED)
        self._transcript = transcript

    def record_summary(self, summary: str) -> None:
        if not summary.strip():
            raise ValueError("A summary must not be empty")
        self._move(PipelineState.SUMMARIZED)
        self._summary = summary

    def fail(self, kind: FailureKind, reason: str) -> None:
        self._move(PipelineState.FAILED)
        self._failure = PipelineFailure(
            kind=kind, message_id=self.message_id, message=reason
        )

    def transcript_for_summary(self) -> str:
        """Returns the transcript to summarize; only valid right after transcription."""
        if self.state is not PipelineState.TRANSCRIBED:
            raise InvalidTransitionError(self.state.value, PipelineState.SUMMARIZED.value)
        return self._transcript

    @property
    def summary(self) -> str | None:
        return self._summary

    @property
    def failure(self) -> PipelineFailure | None:
        return self._failure

    @property
    def finished(self) -> bool:
        return not _TRANSITIONS[self.state]

    def _move(self, target: PipelineState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidTransitionError(self.state.value, target.value)
        self.state = target
