"""Voice message processing endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from voicenote_common import ProcessVoiceMessageRequest, ProcessVoiceMessageResponse

from orchestrator.dependencies import get_handler
from orchestrator.exceptions import PipelineError
from orchestrator.handlers import VoiceMessageHandler

router = APIRouter(prefix="/voice-messages", tags=["voice-messages"])

HandlerDep = Annotated[VoiceMessageHandler, Depends(get_handler)]


@router.post("", response_model=ProcessVoiceMessageResponse)
def process_voice_message(
    request: ProcessVoiceMessageRequest, handler: HandlerDep
) -> ProcessVoiceMessageResponse:
    """
    Transcribes and summarizes one voice message.

    A failed stage answers 502 with the classified failure as detail.
    """
    try:
        return handler.process(request)
    except PipelineError as e:
        raise HTTPException(status_code=502, detail=e.failure.model_dump(mode="json"))
