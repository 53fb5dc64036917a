"""Dependency injection configuration for the whatsapp-gateway service."""

from fastapi import Request
from voicenote_common import setup_logging
from voicenote_common.http import build_http_client
from voicenote_common.infrastructure import build_media_storage

from whatsapp_gateway.config import AppConfig
from whatsapp_gateway.domain import WebhookAuthenticator
from whatsapp_gateway.handlers import WebhookHandler
from whatsapp_gateway.infrastructure import HttpOrchestratorClient, WhatsAppCloudClient

logger = setup_logging()


def build_authenticator(config: AppConfig) -> WebhookAuthenticator:
    return WebhookAuthenticator(config.whatsapp.verify_token, config.whatsapp.app_secret)


def build_handler(config: AppConfig) -> WebhookHandler:
    """
    Composition root for the gateway.

    Creates one long-lived HTTP client for the Graph API and one for the
    orchestrator; both are reused by every delivery.
    """
    whatsapp = config.whatsapp
    graph_http_config = config.http_config(config.timeouts.media)
    graph_client = build_http_client(
        graph_http_config,
        base_url=f"{whatsapp.graph_api_url.rstrip('/')}/{whatsapp.graph_api_version}",
        headers={"Authorization": f"Bearer {whatsapp.api_token}"},
    )
    orchestrator_http_config = config.http_config(config.timeouts.orchestrator)
    orchestrator_client = build_http_client(
        orchestrator_http_config, base_url=config.orchestrator_url
    )

    handler = WebhookHandler(
        messaging=WhatsAppCloudClient(
            graph_client, graph_http_config, whatsapp.phone_number_id
        ),
        orchestrator=HttpOrchestratorClient(
            orchestrator_client, orchestrator_http_config
        ),
        storage=build_media_storage(config.storage),
        timeouts=config.timeouts,
    )
    logger.info(
        "WhatsApp gateway ready",
        extra={
            "orchestrator_url": config.orchestrator_url,
            "graph_api_version": whatsapp.graph_api_version,
        },
    )
    return handler


def get_handler(request: Request) -> WebhookHandler:
    """Returns the handler created at startup."""
    return request.app.state.handler


def get_authenticator(request: Request) -> WebhookAuthenticator:
    """Returns the authenticator created at startup."""
    return request.app.state.authenticator
