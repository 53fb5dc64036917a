"""
End-to-end webhook tests.

The gateway app talks to the real orchestrator app over ``HttpOrchestratorClient``
(``TestClient`` is an ``httpx.Client``); only the stages, the Graph API and the
media store are faked.
"""

import pytest
from fakes import (
    APP_SECRET,
    VERIFY_TOKEN,
    FakeMessagingClient,
    FakeSummarizationClient,
    FakeTranscriptionClient,
    audio_message,
    build_delivery,
    signed,
)
from fastapi.testclient import TestClient

from orchestrator.app import create_app as create_orchestrator_app
from orchestrator.domain import VoiceMessagePipeline
from orchestrator.handlers import VoiceMessageHandler
from voicenote_common import HttpClientConfig
from whatsapp_gateway.app import create_app
from whatsapp_gateway.config import TimeoutConfig
from whatsapp_gateway.domain import WebhookAuthenticator, compute_signature
from whatsapp_gateway.handlers import PROCESSING_FAILED_NOTICE, WebhookHandler
from whatsapp_gateway.infrastructure import HttpOrchestratorClient


class Stack:
    def __init__(self, storage, transcript: str, summary: str):
        self.storage = storage
        self.transcriber = FakeTranscriptionClient(transcript=transcript)
        self.summarizer = FakeSummarizationClient(summary=summary)
        self.messaging = FakeMessagingClient(media={"m1": b"OggS"})

        pipeline = VoiceMessagePipeline(
            self.transcriber, self.summarizer, storage, stage_timeout=45.0
        )
        orchestrator_app = create_orchestrator_app(
            VoiceMessageHandler(pipeline, pipeline_timeout=55.0)
        )
        orchestrator = HttpOrchestratorClient(
            TestClient(orchestrator_app), HttpClientConfig(read_timeout=60.0)
        )
        handler = WebhookHandler(self.messaging, orchestrator, storage, TimeoutConfig())
        self.client = TestClient(
            create_app(handler, WebhookAuthenticator(VERIFY_TOKEN, APP_SECRET))
        )


@pytest.fixture
def stack(storage):
    return Stack(storage, transcript="hello world", summary="**Summary**: hello world")


def test_subscription_handshake_echoes_challenge(stack):
    response = stack.client.get(
        "/webhook",
        params={
            "hub.mode": "subscribe",
            "hub.challenge": "123",
            "hub.verify_token": VERIFY_TOKEN,
        },
    )

    assert response.status_code == 200
    assert response.text == "123"


def test_subscription_with_wrong_token_is_forbidden(stack):
    response = stack.client.get(
        "/webhook",
        params={"hub.mode": "subscribe", "hub.challenge": "123", "hub.verify_token": "nope"},
    )

    assert response.status_code == 403
    assert response.content == b""


def test_voice_message_is_answered_with_its_summary(stack):
    body, headers = signed(build_delivery(audio_message("15550001111", "wamid.1", "m1")))

    response = stack.client.post("/webhook", content=body, headers=headers)

    assert response.status_code == 200
    assert response.json()["succeeded"] == 1
    assert stack.messaging.sent == [("15550001111", "**Summary**: hello world")]
    assert stack.transcriber.requests[0].message_id == "m1"
    assert stack.storage.objects == {}
    assert len(stack.storage.released) == 1


def test_empty_transcript_skips_summarizer_and_sends_notice(storage):
    stack = Stack(storage, transcript="", summary="unused")
    body, headers = signed(build_delivery(audio_message("15550001111", "wamid.1", "m1")))

    response = stack.client.post("/webhook", content=body, headers=headers)

    assert response.status_code == 200
    assert stack.summarizer.requests == []
    assert stack.messaging.sent == [("15550001111", PROCESSING_FAILED_NOTICE)]
    assert len(stack.storage.released) == 1


@pytest.mark.parametrize(
    "signature", [None, "sha256=deadbeef", "not-a-signature"]
)
def test_unsigned_delivery_is_forbidden_without_side_effects(stack, signature):
    body, headers = signed(build_delivery(audio_message("15550001111", "wamid.1", "m1")))
    if signature is None:
        del headers["X-Hub-Signature-256"]
    else:
        headers["X-Hub-Signature-256"] = signature

    response = stack.client.post("/webhook", content=body, headers=headers)

    assert response.status_code == 403
    assert response.content == b""
    assert stack.messaging.sent == []
    assert stack.transcriber.requests == []


def test_delivery_signed_with_another_secret_is_forbidden(stack):
    body, headers = signed(
        build_delivery(audio_message("15550001111", "wamid.1", "m1")), secret="other"
    )

    response = stack.client.post("/webhook", content=body, headers=headers)

    assert response.status_code == 403


def test_malformed_signed_body_is_rejected(stack):
    body = b'{"entry": "not-a-list"'
    headers = {"X-Hub-Signature-256": compute_signature(APP_SECRET, body)}

    response = stack.client.post("/webhook", content=body, headers=headers)

    assert response.status_code == 400
    assert stack.messaging.sent == []
