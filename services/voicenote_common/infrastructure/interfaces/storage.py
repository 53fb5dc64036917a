"""Abstract interface for transient media storage."""

from abc import ABC, abstractmethod

from voicenote_common.models import MediaHandle


class MediaStorage(ABC):
    """Abstract base class for media storage backends."""

    @abstractmethod
    def store(self, media_id: str, data: bytes, mime_type: str) -> MediaHandle:
        """
        Stores downloaded media and returns a handle to it.

        Args:
            media_id: The messaging platform's media identifier.
            data: The raw media bytes.
            mime_type: MIME type reported for the media.

        Returns:
            A MediaHandle pointing at the stored bytes.

        Raises:
            StorageUploadError: If the media cannot be stored.
        """

    @abstractmethod
    def load(self, handle: MediaHandle) -> bytes:
        """
        Reads the bytes behind a handle.

        Raises:
            StorageDownloadError: If the media cannot be read.
        """

    @abstractmethod
    def release(self, handle: MediaHandle) -> None:
        """
        Deletes the bytes behind a handle.

        Raises:
            StorageReleaseError: If the media cannot be deleted.
        """
