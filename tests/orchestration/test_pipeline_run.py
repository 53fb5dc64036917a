import pytest

from orchestrator.domain import PipelineRun, PipelineState
from orchestrator.exceptions import InvalidTransitionError
from voicenote_common import FailureKind


def test_happy_path_reaches_summarized():
    run = PipelineRun("m1")
    run.record_transcript("hello world")

    assert run.transcript_for_summary() == "hello world"

    run.record_summary("**Summary**: hello world")

    assert run.state is PipelineState.SUMMARIZED
    assert run.summary == "**Summary**: hello world"
    assert run.finished


def test_failed_run_never_hands_out_a_transcript():
    run = PipelineRun("m1")
    run.fail(FailureKind.TRANSCRIPTION_FAILED, "empty transcript")

    assert run.finished
    assert run.failure.kind is FailureKind.TRANSCRIPTION_FAILED
    assert run.failure.message_id == "m1"
    with pytest.raises(InvalidTransitionError):
        run.transcript_for_summary()


def test_summary_cannot_skip_transcription():
    run = PipelineRun("m1")

    with pytest.raises(InvalidTransitionError):
        run.record_summary("summary")


def test_terminal_states_are_final():
    run = PipelineRun("m1")
    run.record_transcript("hello")
    run.record_summary("summary")

    with pytest.raises(InvalidTransitionError):
        run.fail(FailureKind.SUMMARIZATION_FAILED, "late")


def test_blank_transcript_is_refused():
    run = PipelineRun("m1")

    with pytest.raises(ValueError):
        run.record_transcript("   ")
    assert run.state is PipelineState.FETCHED
