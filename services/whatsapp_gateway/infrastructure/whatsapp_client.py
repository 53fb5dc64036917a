"""WhatsApp Cloud API implementation of the MessagingClient interface."""

import httpx
from pydantic import ValidationError
from voicenote_common import HttpClientConfig, setup_logging
from voicenote_common.http import call_timeout

from whatsapp_gateway.domain import MediaMetadata
from whatsapp_gateway.exceptions import MediaFetchError, ReplyDeliveryError

from .interfaces import MessagingClient

logger = setup_logging()


class WhatsAppCloudClient(MessagingClient):
    """
    Talks to the WhatsApp Cloud (Graph) API.

    The injected client carries the Graph API base URL and the bearer token,
    and is shared by every request thread.
    """

    def __init__(
        self, client: httpx.Client, config: HttpClientConfig, phone_number_id: str
    ):
        self._client = client
        self._config = config
        self._phone_number_id = phone_number_id

    def get_media_metadata(self, media_id: str, timeout: float) -> MediaMetadata:
        try:
            response = self._client.get(
                f"/{media_id}", timeout=call_timeout(self._config, timeout)
            )
        except httpx.HTTPError as e:
            logger.exception("Media URL request failed", extra={"media_id": media_id})
            raise MediaFetchError(media_id, "resolve", e) from e

        if response.status_code != 200:
            logger.error(
                "Media URL request rejected",
                extra={"media_id": media_id, "status_code": response.status_code},
            )
            raise MediaFetchError(media_id, "resolve")

        try:
            return MediaMetadata.model_validate_json(response.content)
        except ValidationError as e:
            logger.exception("Media URL response invalid", extra={"media_id": media_id})
            raise MediaFetchError(media_id, "resolve", e) from e

    def download_media(self, media_id: str, url: str, timeout: float) -> bytes:
        try:
            response = self._client.get(url, timeout=call_timeout(self._config, timeout))
        except httpx.HTTPError as e:
            logger.exception("Media download failed", extra={"media_id": media_id})
            raise MediaFetchError(media_id, "download", e) from e

        if response.status_code != 200:
            logger.error(
                "Media download rejected",
                extra={"media_id": media_id, "status_code": response.status_code},
            )
            raise MediaFetchError(media_id, "download")

        logger.info(
            "Media downloaded",
            extra={"media_id": media_id, "size": len(response.content)},
        )
        return response.content

    def send_text(self, recipient_id: str, body: str, timeout: float) -> None:
        payload = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": recipient_id,
            "type": "text",
            "text": {"body": body},
        }
        try:
            response = self._client.post(
                f"/{self._phone_number_id}/messages",
                json=payload,
                timeout=call_timeout(self._config, timeout),
            )
        except httpx.HTTPError as e:
            raise ReplyDeliveryError(recipient_id, "request failed", e) from e

        if not response.is_success:
            raise ReplyDeliveryError(
                recipient_id, f"status {response.status_code}: {response.text[:500]}"
            )

        logger.info("Reply sent", extra={"recipient_id": recipient_id})
