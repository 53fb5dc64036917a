"""Authentication of inbound webhook traffic."""

import hashlib
import hmac

SIGNATURE_PREFIX = "sha256="
SUBSCRIBE_MODE = "subscribe"


def compute_signature(app_secret: str, body: bytes) -> str:
    """Returns the ``sha256=<hex>`` HMAC of a raw body, as sent by WhatsApp."""
    digest = hmac.new(app_secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


class WebhookAuthenticator:
    """Checks the subscription handshake and the signature of each delivery."""

    def __init__(self, verify_token: str, app_secret: str):
        self._verify_token = verify_token
        self._app_secret = app_secret

    def verify_subscription(
        self, mode: str | None, token: str | None, challenge: str | None
    ) -> str | None:
        """
        Returns the challenge to echo back, or None if the handshake is refused.

        An empty configured token never matches.
        """
        if mode != SUBSCRIBE_MODE or not token or not self._verify_token:
            return None
        if not hmac.compare_digest(token.encode("utf-8"), self._verify_token.encode("utf-8")):
            return None
        return challenge or ""

    def verify_signature(self, body: bytes, signature_header: str | None) -> bool:
        """
        Verifies the ``X-Hub-Signature-256`` header against the exact raw body.

        The comparison runs in constant time. A missing header, or a missing
        app secret, fails verification.
        """
        if not signature_header or not self._app_secret:
            return False
        expected = compute_signature(self._app_secret, body)
        return hmac.compare_digest(
            expected.encode("utf-8"), signature_header.strip().encode("utf-8")
        )
