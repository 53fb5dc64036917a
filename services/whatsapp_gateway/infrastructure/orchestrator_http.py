"""HTTP implementation of the OrchestratorClient interface."""

import httpx
from pydantic import ValidationError
from voicenote_common import (
    HttpClientConfig,
    MediaHandle,
    ProcessVoiceMessageRequest,
    ProcessVoiceMessageResponse,
    setup_logging,
)
from voicenote_common.http import call_timeout

from whatsapp_gateway.domain import InboundEvent
from whatsapp_gateway.exceptions import (
    OrchestrationError,
    OrchestratorUnavailableError,
)

from .interfaces import OrchestratorClient

logger = setup_logging()


class HttpOrchestratorClient(OrchestratorClient):
    """Posts jobs to the orchestrator over one long-lived HTTP client."""

    def __init__(self, client: httpx.Client, config: HttpClientConfig):
        self._client = client
        self._config = config

    def process(self, event: InboundEvent, media: MediaHandle, timeout: float) -> str:
        request = ProcessVoiceMessageRequest(
            sender_id=event.sender_id, media_id=media.media_id, media=media
        )
        try:
            response = self._client.post(
                "/voice-messages",
                json=request.model_dump(mode="json"),
                timeout=call_timeout(self._config, timeout),
            )
        except (
            httpx.ConnectError,
            httpx.ConnectTimeout,
            httpx.PoolTimeout,
            httpx.WriteTimeout,
        ) as e:
            # The job body never reached the route, so no pipeline was started.
            raise OrchestratorUnavailableError(media.media_id, "unreachable", e) from e
        except httpx.TimeoutException as e:
            raise OrchestrationError(media.media_id, "timed out", e) from e
        except httpx.HTTPError as e:
            raise OrchestrationError(media.media_id, "request failed", e) from e

        if response.is_client_error:
            raise OrchestratorUnavailableError(
                media.media_id, f"rejected with status {response.status_code}"
            )
        if response.status_code != 200:
            raise OrchestrationError(
                media.media_id, f"status {response.status_code}: {response.text[:500]}"
            )

        try:
            result = ProcessVoiceMessageResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise OrchestrationError(media.media_id, "invalid response", e) from e

        if result.message_id != media.media_id:
            raise OrchestrationError(
                media.media_id, f"answer for '{result.message_id}' received"
            )

        return result.summary
