from whatsapp_gateway.handlers.webhook_handler import (
    DOWNLOAD_FAILED_NOTICE,
    PROCESSING_FAILED_NOTICE,
    WebhookHandler,
)

__all__ = ["WebhookHandler", "DOWNLOAD_FAILED_NOTICE", "PROCESSING_FAILED_NOTICE"]
