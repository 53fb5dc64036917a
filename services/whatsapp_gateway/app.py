"""FastAPI application factory."""

from fastapi import FastAPI

from whatsapp_gateway.domain import WebhookAuthenticator
from whatsapp_gateway.handlers import WebhookHandler
from whatsapp_gateway.routes import webhook_router


def create_app(handler: WebhookHandler, authenticator: WebhookAuthenticator) -> FastAPI:
    app = FastAPI(title="WhatsApp Voice Note Gateway")
    app.state.handler = handler
    app.state.authenticator = authenticator
    app.include_router(webhook_router)
    return app
