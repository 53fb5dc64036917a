"""
Audio Transcriber Service.

Entry point for the transcription stage.
"""

import uvicorn
from ddtrace import patch_all
from voicenote_common import setup_logging

from audio_transcriber.app import create_app
from audio_transcriber.config import load_config
from audio_transcriber.dependencies import build_handler

logger = setup_logging()
patch_all()

_config = load_config()

app = create_app(build_handler(_config))


def main():
    """Serves the transcription API."""
    logger.info("Starting audio-transcriber service", extra={"port": _config.port})
    uvicorn.run(app, host="0.0.0.0", port=_config.port, log_config=None)


if __name__ == "__main__":
    main()
