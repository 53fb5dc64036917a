"""Domain layer exports."""

from whatsapp_gateway.domain.models import (
    DeliveryReport,
    InboundEvent,
    MediaMetadata,
    WebhookMessage,
    WebhookPayload,
)
from whatsapp_gateway.domain.webhook_auth import WebhookAuthenticator, compute_signature

__all__ = [
    "DeliveryReport",
    "InboundEvent",
    "MediaMetadata",
    "WebhookMessage",
    "WebhookPayload",
    "WebhookAuthenticator",
    "compute_signature",
]
