from voicenote_common.config import (
    HttpClientConfig,
    MinioConfig,
    StorageConfig,
    load_storage_config,
)
from voicenote_common.deadline import Deadline
from voicenote_common.exceptions import (
    DeadlineExceededError,
    StorageDownloadError,
    StorageReleaseError,
    StorageUploadError,
)
from voicenote_common.logging import setup_logging
from voicenote_common.models import (
    FailureKind,
    MediaHandle,
    PipelineFailure,
    ProcessVoiceMessageRequest,
    ProcessVoiceMessageResponse,
    SummarizationRequest,
    SummarizationResponse,
    TranscriptionRequest,
    TranscriptionResponse,
)

__all__ = [
    "setup_logging",
    "Deadline",
    "DeadlineExceededError",
    "StorageDownloadError",
    "StorageReleaseError",
    "StorageUploadError",
    "HttpClientConfig",
    "MinioConfig",
    "StorageConfig",
    "load_storage_config",
    "FailureKind",
    "MediaHandle",
    "PipelineFailure",
    "ProcessVoiceMessageRequest",
    "ProcessVoiceMessageResponse",
    "SummarizationRequest",
    "SummarizationResponse",
    "TranscriptionRequest",
    "TranscriptionResponse",
]
