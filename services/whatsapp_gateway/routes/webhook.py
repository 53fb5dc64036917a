"""WhatsApp webhook endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from voicenote_common import setup_logging

from whatsapp_gateway.dependencies import get_authenticator, get_handler
from whatsapp_gateway.domain import DeliveryReport, WebhookAuthenticator, WebhookPayload
from whatsapp_gateway.handlers import WebhookHandler

logger = setup_logging()

router = APIRouter(prefix="/webhook", tags=["webhook"])

HandlerDep = Annotated[WebhookHandler, Depends(get_handler)]
AuthenticatorDep = Annotated[WebhookAuthenticator, Depends(get_authenticator)]


@router.get("", response_class=PlainTextResponse)
def verify_subscription(
    authenticator: AuthenticatorDep,
    mode: Annotated[str | None, Query(alias="hub.mode")] = None,
    verify_token: Annotated[str | None, Query(alias="hub.verify_token")] = None,
    challenge: Annotated[str | None, Query(alias="hub.challenge")] = None,
):
    """Answers the subscription handshake by echoing the challenge."""
    echoed = authenticator.verify_subscription(mode, verify_token, challenge)
    if echoed is None:
        logger.warning("Webhook verification refused", extra={"mode": mode})
        return Response(status_code=403)
    logger.info("Webhook verified")
    return PlainTextResponse(echoed)


@router.post("", response_model=DeliveryReport)
async def receive_delivery(
    request: Request,
    authenticator: AuthenticatorDep,
    handler: HandlerDep,
    signature: Annotated[str | None, Header(alias="X-Hub-Signature-256")] = None,
):
    """
    Receives a signed delivery and processes its voice messages.

    The signature is checked against the raw body before anything is parsed;
    a refused delivery gets an empty 403, like a refused handshake.
    Once authenticated and parsed, the delivery is always acknowledged with
    200, whatever happened to the individual messages.
    """
    body = await request.body()

    if not authenticator.verify_signature(body, signature):
        logger.warning(
            "Invalid webhook signature", extra={"signature_present": signature is not None}
        )
        return Response(status_code=403)

    try:
        payload = WebhookPayload.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Malformed webhook body", extra={"errors": e.error_count()})
        raise HTTPException(status_code=400, detail="Malformed webhook body")

    return await run_in_threadpool(handler.handle_delivery, payload)
