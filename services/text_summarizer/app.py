"""FastAPI application factory."""

from fastapi import FastAPI

from text_summarizer.handlers import SummarizationHandler
from text_summarizer.routes import summaries_router


def create_app(handler: SummarizationHandler) -> FastAPI:
    app = FastAPI(title="Text Summarizer")
    app.state.handler = handler
    app.include_router(summaries_router)
    return app
