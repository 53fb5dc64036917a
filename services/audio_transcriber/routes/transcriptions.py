"""Transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from voicenote_common import (
    StorageDownloadError,
    TranscriptionRequest,
    TranscriptionResponse,
    setup_logging,
)

from audio_transcriber.dependencies import get_handler
from audio_transcriber.exceptions import TranscriptionError
from audio_transcriber.handlers import TranscriptionHandler

logger = setup_logging()

router = APIRouter(prefix="/transcriptions", tags=["transcriptions"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]


@router.post("", response_model=TranscriptionResponse)
def transcribe(
    request: TranscriptionRequest, handler: HandlerDep
) -> TranscriptionResponse:
    """Transcribes the audio referenced by the request's media handle."""
    try:
        return handler.process(request)
    except StorageDownloadError:
        raise HTTPException(status_code=502, detail="Audio could not be read")
    except TranscriptionError as e:
        raise HTTPException(status_code=502, detail=str(e))
