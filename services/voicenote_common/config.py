"""Shared configuration models for infrastructure components."""

import os
import tempfile
from pathlib import Path
from typing import Literal

from pydantic import BaseModel


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "voice-messages"
    secure: bool = False


class StorageConfig(BaseModel, frozen=True):
    """Transient media storage configuration."""

    backend: Literal["minio", "local"] = "minio"
    local_dir: Path = Path(tempfile.gettempdir()) / "voice-messages"
    minio: MinioConfig | None = None


class HttpClientConfig(BaseModel, frozen=True):
    """Timeouts for a long-lived outbound HTTP client, in seconds."""

    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0
    pool_timeout: float = 5.0


def load_storage_config() -> StorageConfig:
    """Loads the media storage configuration from environment variables."""
    backend = os.getenv("MEDIA_STORAGE_BACKEND", "minio")
    minio = None
    if backend == "minio":
        minio = MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "voice-messages"),
        )
    local_dir = os.getenv("MEDIA_LOCAL_DIR")
    if local_dir:
        return StorageConfig(backend=backend, local_dir=Path(local_dir), minio=minio)
    return StorageConfig(backend=backend, minio=minio)
