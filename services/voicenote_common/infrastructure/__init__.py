"""Infrastructure layer exports."""

from minio import Minio

from voicenote_common.config import StorageConfig
from voicenote_common.infrastructure.interfaces import MediaStorage
from voicenote_common.infrastructure.local_storage import LocalMediaStorage
from voicenote_common.infrastructure.minio_storage import MinioMediaStorage


def build_media_storage(config: StorageConfig) -> MediaStorage:
    """Creates the media storage backend selected by configuration."""
    if config.backend == "local":
        return LocalMediaStorage(config.local_dir)

    if config.minio is None:
        raise ValueError("MinIO storage selected without MinIO configuration")

    client = Minio(
        endpoint=config.minio.endpoint,
        access_key=config.minio.user,
        secret_key=config.minio.password,
        secure=config.minio.secure,
    )
    storage = MinioMediaStorage(client, config.minio.bucket_name)
    storage.ensure_bucket_exists()
    return storage


__all__ = [
    "MediaStorage",
    "LocalMediaStorage",
    "MinioMediaStorage",
    "build_media_storage",
]
