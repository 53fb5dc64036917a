"""Entry point for the text-summarizer service."""

import uvicorn
from ddtrace import patch_all
from voicenote_common import setup_logging

from text_summarizer.app import create_app
from text_summarizer.config import load_config
from text_summarizer.dependencies import build_handler

logger = setup_logging()
patch_all()

_config = load_config()

app = create_app(build_handler(_config))


def main():
    """Serves the summarization API."""
    logger.info("Starting text-summarizer service", extra={"port": _config.port})
    uvicorn.run(app, host="0.0.0.0", port=_config.port, log_config=None)


if __name__ == "__main__":
    main()
