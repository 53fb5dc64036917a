from unittest.mock import Mock

import pytest
from fakes import FakeMediaStorage
from fastapi.testclient import TestClient

from audio_transcriber.app import create_app
from audio_transcriber.exceptions import TranscriptionError
from audio_transcriber.handlers import TranscriptionHandler
from audio_transcriber.infrastructure.interfaces import TranscriptionService
from voicenote_common import TranscriptionRequest


@pytest.fixture
def stored():
    storage = FakeMediaStorage()
    handle = storage.store("m1", b"OggS", "audio/ogg")
    return storage, handle


def test_handler_transcribes_stored_audio(stored):
    storage, handle = stored
    service = Mock(spec=TranscriptionService)
    service.transcribe.return_value = "hello world"
    handler = TranscriptionHandler(storage, service)

    response = handler.process(TranscriptionRequest(message_id="m1", media=handle))

    assert response.message_id == "m1"
    assert response.transcript == "hello world"
    service.transcribe.assert_called_once_with(b"OggS", "audio/ogg")
    assert storage.released == []


def test_route_returns_transcript(stored):
    storage, handle = stored
    service = Mock(spec=TranscriptionService)
    service.transcribe.return_value = "hello world"
    client = TestClient(create_app(TranscriptionHandler(storage, service)))

    response = client.post(
        "/transcriptions",
        json={"message_id": "m1", "media": handle.model_dump(mode="json")},
    )

    assert response.status_code == 200
    assert response.json() == {"message_id": "m1", "transcript": "hello world"}


def test_route_maps_backend_failure_to_502(stored):
    storage, handle = stored
    service = Mock(spec=TranscriptionService)
    service.transcribe.side_effect = TranscriptionError("model call failed")
    client = TestClient(create_app(TranscriptionHandler(storage, service)))

    response = client.post(
        "/transcriptions",
        json={"message_id": "m1", "media": handle.model_dump(mode="json")},
    )

    assert response.status_code == 502
    assert "model call failed" in response.json()["detail"]


def test_route_rejects_request_without_media():
    client = TestClient(
        create_app(TranscriptionHandler(FakeMediaStorage(), Mock(spec=TranscriptionService)))
    )

    response = client.post("/transcriptions", json={"message_id": "m1"})

    assert response.status_code == 422
