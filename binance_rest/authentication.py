"""HMAC-SHA256 request signing."""

from __future__ import annotations

import hashlib
import hmac


def hmac_signature(secret: str, payload: str) -> str:
    """Return the hex HMAC-SHA256 of *payload* keyed with *secret*."""
    return hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
