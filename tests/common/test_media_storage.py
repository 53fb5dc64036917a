from pathlib import Path
from unittest.mock import Mock

import pytest

from voicenote_common import (
    MediaHandle,
    StorageConfig,
    StorageDownloadError,
    StorageReleaseError,
    StorageUploadError,
)
from voicenote_common.infrastructure import (
    LocalMediaStorage,
    MinioMediaStorage,
    build_media_storage,
)


@pytest.fixture
def local_storage(tmp_path):
    return LocalMediaStorage(tmp_path / "media")


def test_local_store_load_release(local_storage, tmp_path):
    handle = local_storage.store("m1", b"OggS-data", "audio/ogg; codecs=opus")

    assert handle.media_id == "m1"
    assert handle.size == 9
    assert handle.location.startswith(str(tmp_path / "media"))
    assert local_storage.load(handle) == b"OggS-data"

    local_storage.release(handle)

    with pytest.raises(StorageDownloadError):
        local_storage.load(handle)


def test_local_release_twice_fails(local_storage):
    handle = local_storage.store("m1", b"data", "audio/ogg")
    local_storage.release(handle)

    with pytest.raises(StorageReleaseError):
        local_storage.release(handle)


def test_local_refuses_locations_outside_directory(local_storage, tmp_path):
    outside = tmp_path / "secret.txt"
    outside.write_bytes(b"secret")
    handle = MediaHandle(media_id="m1", location=str(outside), size=6)

    with pytest.raises(StorageDownloadError):
        local_storage.load(handle)
    with pytest.raises(StorageReleaseError):
        local_storage.release(handle)
    assert outside.exists()


def test_minio_store_puts_object_under_media_prefix():
    client = Mock()
    storage = MinioMediaStorage(client, "voice-messages")

    handle = storage.store("m1", b"data", "audio/ogg")

    kwargs = client.put_object.call_args.kwargs
    assert kwargs["bucket_name"] == "voice-messages"
    assert kwargs["object_name"] == handle.location
    assert kwargs["length"] == 4
    assert kwargs["content_type"] == "audio/ogg"
    assert handle.location.startswith("incoming/m1/")


def test_minio_load_closes_response():
    client = Mock()
    client.get_object.return_value.data = b"audio"
    storage = MinioMediaStorage(client, "voice-messages")
    handle = MediaHandle(media_id="m1", location="incoming/m1/a.ogg", size=5)

    assert storage.load(handle) == b"audio"
    client.get_object.assert_called_once_with("voice-messages", "incoming/m1/a.ogg")
    client.get_object.return_value.close.assert_called_once()
    client.get_object.return_value.release_conn.assert_called_once()


def test_minio_errors_are_wrapped():
    client = Mock()
    client.put_object.side_effect = RuntimeError("boom")
    client.get_object.side_effect = RuntimeError("boom")
    client.remove_object.side_effect = RuntimeError("boom")
    storage = MinioMediaStorage(client, "voice-messages")
    handle = MediaHandle(media_id="m1", location="incoming/m1/a.ogg", size=5)

    with pytest.raises(StorageUploadError):
        storage.store("m1", b"data", "audio/ogg")
    with pytest.raises(StorageDownloadError):
        storage.load(handle)
    with pytest.raises(StorageReleaseError) as exc_info:
        storage.release(handle)
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_minio_creates_missing_bucket():
    client = Mock()
    client.bucket_exists.return_value = False

    MinioMediaStorage(client, "voice-messages").ensure_bucket_exists()

    client.make_bucket.assert_called_once_with("voice-messages")


def test_build_media_storage_requires_minio_settings():
    with pytest.raises(ValueError):
        build_media_storage(StorageConfig(backend="minio"))


def test_build_media_storage_local(tmp_path):
    storage = build_media_storage(StorageConfig(backend="local", local_dir=tmp_path))

    assert isinstance(storage, LocalMediaStorage)


def test_local_store_keeps_hostile_media_id_inside_directory(local_storage, tmp_path):
    handle = local_storage.store("../escaped", b"data", "audio/ogg")

    media_dir = (tmp_path / "media").resolve()
    assert Path(handle.location).resolve().parent == media_dir
    assert list(tmp_path.glob("escaped-*")) == []

    local_storage.release(handle)

    assert list(media_dir.iterdir()) == []
