"""Local filesystem implementation of the MediaStorage interface."""

import mimetypes
import re
import uuid
from pathlib import Path

from voicenote_common.exceptions import (
    StorageDownloadError,
    StorageReleaseError,
    StorageUploadError,
)
from voicenote_common.infrastructure.interfaces import MediaStorage
from voicenote_common.logging import setup_logging
from voicenote_common.models import MediaHandle

logger = setup_logging()

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class LocalMediaStorage(MediaStorage):
    """
    Keeps voice message audio as files in a directory.

    Every service that touches a handle must see the same directory, so this
    backend suits single-host deployments or containers sharing a volume.
    """

    def __init__(self, directory: Path):
        self._directory = directory

    def store(self, media_id: str, data: bytes, mime_type: str) -> MediaHandle:
        extension = mimetypes.guess_extension(mime_type.split(";")[0].strip()) or ""
        safe_id = _UNSAFE_NAME_CHARS.sub("_", media_id)
        path = self._directory / f"{safe_id}-{uuid.uuid4().hex}{extension}"
        try:
            self._contain(path)
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except (OSError, ValueError) as e:
            logger.exception("Writing media file failed", extra={"path": str(path)})
            raise StorageUploadError(media_id, e) from e

        logger.info("Media stored on disk", extra={"path": str(path), "size": len(data)})
        return MediaHandle(
            media_id=media_id,
            location=str(path),
            mime_type=mime_type,
            size=len(data),
        )

    def load(self, handle: MediaHandle) -> bytes:
        try:
            path = self._resolve(handle)
            return path.read_bytes()
        except (OSError, ValueError) as e:
            logger.exception(
                "Reading media file failed", extra={"location": handle.location}
            )
            raise StorageDownloadError(handle.location, e) from e

    def release(self, handle: MediaHandle) -> None:
        try:
            path = self._resolve(handle)
            path.unlink()
        except (OSError, ValueError) as e:
            logger.exception(
                "Deleting media file failed", extra={"location": handle.location}
            )
            raise StorageReleaseError(handle.location, e) from e
        logger.info("Media released", extra={"path": str(path)})

    def _resolve(self, handle: MediaHandle) -> Path:
        """Maps a handle to a path, refusing locations outside the directory."""
        return self._contain(Path(handle.location))

    def _contain(self, path: Path) -> Path:
        resolved = path.resolve()
        if not resolved.is_relative_to(self._directory.resolve()):
            raise ValueError(f"'{path}' is outside the media directory")
        return resolved
