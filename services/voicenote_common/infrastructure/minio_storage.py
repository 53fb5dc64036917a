"""MinIO implementation of the MediaStorage interface."""

import io
import mimetypes
import uuid

from minio import Minio

from voicenote_common.exceptions import (
    StorageDownloadError,
    StorageReleaseError,
    StorageUploadError,
)
from voicenote_common.infrastructure.interfaces import MediaStorage
from voicenote_common.logging import setup_logging
from voicenote_common.models import MediaHandle

logger = setup_logging()


class MinioMediaStorage(MediaStorage):
    """Keeps voice message audio in a MinIO bucket for the length of one job."""

    def __init__(self, client: Minio, bucket_name: str):
        self._client = client
        self._bucket_name = bucket_name

    def store(self, media_id: str, data: bytes, mime_type: str) -> MediaHandle:
        extension = mimetypes.guess_extension(mime_type.split(";")[0].strip()) or ""
        object_name = f"incoming/{media_id}/{uuid.uuid4().hex}{extension}"
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=io.BytesIO(data),
                length=len(data),
                content_type=mime_type,
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "media_id": media_id},
            )
            raise StorageUploadError(media_id, e) from e

        logger.info(
            "Media stored in MinIO",
            extra={
                "bucket_name": self._bucket_name,
                "object_name": object_name,
                "size": len(data),
            },
        )
        return MediaHandle(
            media_id=media_id,
            location=object_name,
            mime_type=mime_type,
            size=len(data),
        )

    def load(self, handle: MediaHandle) -> bytes:
        try:
            response = self._client.get_object(self._bucket_name, handle.location)
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": self._bucket_name, "object_name": handle.location},
            )
            raise StorageDownloadError(handle.location, e) from e

        logger.info(
            "Media read from MinIO",
            extra={"object_name": handle.location, "size": len(data)},
        )
        return data

    def release(self, handle: MediaHandle) -> None:
        try:
            self._client.remove_object(self._bucket_name, handle.location)
        except Exception as e:
            logger.exception(
                "MinIO delete failed",
                extra={"bucket_name": self._bucket_name, "object_name": handle.location},
            )
            raise StorageReleaseError(handle.location, e) from e
        logger.info("Media released", extra={"object_name": handle.location})

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info(
                "Bucket already exists", extra={"bucket_name": self._bucket_name}
            )
