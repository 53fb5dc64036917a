"""
WhatsApp Gateway Service.

Entry point for the webhook receiver.
"""

import uvicorn
from ddtrace import patch_all
from voicenote_common import setup_logging

from whatsapp_gateway.app import create_app
from whatsapp_gateway.config import load_config
from whatsapp_gateway.dependencies import build_authenticator, build_handler

logger = setup_logging()
patch_all()

_config = load_config()

app = create_app(build_handler(_config), build_authenticator(_config))


def main():
    """Serves the webhook API."""
    logger.info("Starting whatsapp-gateway service", extra={"port": _config.port})
    uvicorn.run(app, host="0.0.0.0", port=_config.port, log_config=None)


if __name__ == "__main__":
    main()
