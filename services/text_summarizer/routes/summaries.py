"""Summarization endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from voicenote_common import SummarizationRequest, SummarizationResponse

from text_summarizer.dependencies import get_handler
from text_summarizer.exceptions import EmptyTranscriptError, LLMServiceError
from text_summarizer.handlers import SummarizationHandler

router = APIRouter(prefix="/summaries", tags=["summaries"])

HandlerDep = Annotated[SummarizationHandler, Depends(get_handler)]


@router.post("", response_model=SummarizationResponse)
def summarize(
    request: SummarizationRequest, handler: HandlerDep
) -> SummarizationResponse:
    """Summarizes a transcript."""
    try:
        return handler.process(request)
    except EmptyTranscriptError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except LLMServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
