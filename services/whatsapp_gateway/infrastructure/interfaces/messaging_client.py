"""Abstract interface for the messaging platform API."""

from abc import ABC, abstractmethod

from whatsapp_gateway.domain import MediaMetadata


class MessagingClient(ABC):
    """Abstract base class for messaging platform clients."""

    @abstractmethod
    def get_media_metadata(self, media_id: str, timeout: float) -> MediaMetadata:
        """
        Resolves a media id to a short-lived download URL.

        Raises:
            MediaFetchError: If the platform does not answer with a URL.
        """

    @abstractmethod
    def download_media(self, media_id: str, url: str, timeout: float) -> bytes:
        """
        Downloads media bytes from a URL returned by ``get_media_metadata``.

        Raises:
            MediaFetchError: If the download does not succeed.
        """

    @abstractmethod
    def send_text(self, recipient_id: str, body: str, timeout: float) -> None:
        """
        Sends a text message to a user.

        Raises:
            ReplyDeliveryError: If the platform does not accept the message.
        """
