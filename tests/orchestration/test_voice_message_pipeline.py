import pytest
from fakes import (
    FakeMediaStorage,
    FakeSummarizationClient,
    FakeTranscriptionClient,
)
from fastapi.testclient import TestClient

from orchestrator.app import create_app
from orchestrator.domain import VoiceMessagePipeline
from orchestrator.exceptions import PipelineError, StageCallError
from orchestrator.handlers import VoiceMessageHandler
from voicenote_common import (
    Deadline,
    FailureKind,
    ProcessVoiceMessageRequest,
    TranscriptionResponse,
)


@pytest.fixture
def job(storage):
    handle = storage.store("m1", b"OggS", "audio/ogg")
    return ProcessVoiceMessageRequest(sender_id="15550001111", media_id="m1", media=handle)


def build_pipeline(storage, transcriber, summarizer):
    return VoiceMessagePipeline(transcriber, summarizer, storage, stage_timeout=45.0)


def test_successful_run_returns_summary_and_releases_media(storage, job):
    transcriber = FakeTranscriptionClient(transcript="hello world")
    summarizer = FakeSummarizationClient(summary="**Summary**: hello world")

    result = build_pipeline(storage, transcriber, summarizer).run(job, Deadline(55.0))

    assert result.message_id == "m1"
    assert result.summary == "**Summary**: hello world"
    assert transcriber.requests[0].message_id == "m1"
    assert summarizer.requests[0].transcript == "hello world"
    assert storage.released == [job.media.location]


@pytest.mark.parametrize(
    "transcriber",
    [
        FakeTranscriptionClient(transcript=""),
        FakeTranscriptionClient(transcript="  \n"),
        FakeTranscriptionClient(error=StageCallError("transcription", "m1", "timed out")),
    ],
)
def test_failed_transcription_never_reaches_summarizer(storage, job, transcriber):
    summarizer = FakeSummarizationClient(summary="unused")

    with pytest.raises(PipelineError) as exc_info:
        build_pipeline(storage, transcriber, summarizer).run(job, Deadline(55.0))

    assert exc_info.value.kind is FailureKind.TRANSCRIPTION_FAILED
    assert summarizer.requests == []
    assert storage.released == [job.media.location]


def test_failed_summarization_is_classified(storage, job):
    transcriber = FakeTranscriptionClient(transcript="hello world")
    summarizer = FakeSummarizationClient(
        error=StageCallError("summarization", "m1", "status 502")
    )

    with pytest.raises(PipelineError) as exc_info:
        build_pipeline(storage, transcriber, summarizer).run(job, Deadline(55.0))

    assert exc_info.value.kind is FailureKind.SUMMARIZATION_FAILED
    assert storage.released == [job.media.location]


def test_answer_for_another_message_is_a_failure(storage, job):
    class WrongCorrelation(FakeTranscriptionClient):
        def transcribe(self, request, timeout):
            super().transcribe(request, timeout)
            return TranscriptionResponse(message_id="m2", transcript="someone else")

    summarizer = FakeSummarizationClient(summary="unused")

    with pytest.raises(PipelineError) as exc_info:
        build_pipeline(storage, WrongCorrelation(), summarizer).run(job, Deadline(55.0))

    assert exc_info.value.kind is FailureKind.TRANSCRIPTION_FAILED
    assert summarizer.requests == []


def test_spent_deadline_fails_without_calling_stages(storage, job):
    transcriber = FakeTranscriptionClient(transcript="hello")
    summarizer = FakeSummarizationClient(summary="unused")
    deadline = Deadline(10.0, clock=iter([0.0, 20.0, 20.0]).__next__)

    with pytest.raises(PipelineError):
        build_pipeline(storage, transcriber, summarizer).run(job, deadline)

    assert transcriber.requests == []
    assert storage.released == [job.media.location]


def test_release_failure_does_not_change_outcome(job):
    storage = FakeMediaStorage(fail_release=True)
    pipeline = build_pipeline(
        storage,
        FakeTranscriptionClient(transcript="hello"),
        FakeSummarizationClient(summary="short"),
    )

    assert pipeline.run(job, Deadline(55.0)).summary == "short"
    assert storage.released == [job.media.location]


def test_route_reports_classified_failure(storage, job):
    pipeline = build_pipeline(
        storage,
        FakeTranscriptionClient(transcript=""),
        FakeSummarizationClient(summary="unused"),
    )
    client = TestClient(create_app(VoiceMessageHandler(pipeline, pipeline_timeout=55.0)))

    response = client.post("/voice-messages", json=job.model_dump(mode="json"))

    assert response.status_code == 502
    assert response.json()["detail"] == {
        "kind": "transcription_failed",
        "message_id": "m1",
        "message": "empty transcript",
    }


def test_route_returns_summary(storage, job):
    pipeline = build_pipeline(
        storage,
        FakeTranscriptionClient(transcript="hello world"),
        FakeSummarizationClient(summary="**Summary**: hello world"),
    )
    client = TestClient(create_app(VoiceMessageHandler(pipeline, pipeline_timeout=55.0)))

    response = client.post("/voice-messages", json=job.model_dump(mode="json"))

    assert response.status_code == 200
    assert response.json() == {"message_id": "m1", "summary": "**Summary**: hello world"}


@pytest.mark.parametrize("summary", ["", "   \n"])
def test_blank_summary_is_a_summarization_failure(storage, job, summary):
    pipeline = build_pipeline(
        storage,
        FakeTranscriptionClient(transcript="hello world"),
        FakeSummarizationClient(summary=summary),
    )

    with pytest.raises(PipelineError) as exc_info:
        pipeline.run(job, Deadline(55.0))

    assert exc_info.value.kind is FailureKind.SUMMARIZATION_FAILED
    assert exc_info.value.failure.message == "empty summary"
    assert storage.released == [job.media.location]
