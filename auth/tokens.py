"""
JWT-style token creation and verification.

Tokens are URL-safe base64-encoded JSON payloads signed with HMAC-SHA256::

    <base64(payload)>.<hex signature>

The payload carries the subject ``user_id`` and an absolute ``exp`` (unix
seconds).  The secret comes from ``Settings.jwt_secret`` (env var:
``JWT_SECRET``) and is handed to :class:`TokenService` once at startup.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import b64decode, urlsafe_b64encode
from typing import Callable

from utils.errors import InvalidToken

DEFAULT_EXPIRY_SECONDS = 7 * 24 * 3600


class TokenService:
    """Issues and validates signed, time-limited identity tokens."""

    def __init__(
        self,
        secret: str,
        expiry_seconds: int = DEFAULT_EXPIRY_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret.encode()
        self._expiry_seconds = expiry_seconds
        self._clock = clock

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, user_id: int) -> str:
        """Create a signed token containing ``user_id`` and expiry."""
        payload = {
            "user_id": user_id,
            "exp": int(self._clock()) + self._expiry_seconds,
        }
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def validate(self, token: str) -> int:
        """
        Verify token and return the subject ``user_id``.

        Raises ``InvalidToken`` on malformed, tampered or expired tokens.
        """
        encoded, sep, signature = token.partition(".")
        if not sep or not encoded or not signature:
            raise InvalidToken("malformed token")
        try:
            raw = b64decode(encoded.encode(), altchars=b"-_", validate=True)
        except (binascii.Error, ValueError):
            raise InvalidToken("malformed token") from None
        # altchars still lets "+" and "/" through; only the issued spelling is valid
        if urlsafe_b64encode(raw).decode() != encoded:
            raise InvalidToken("malformed token")

        if not hmac.compare_digest(signature.encode(), self._sign(raw).encode()):
            raise InvalidToken("bad signature")

        try:
            payload = json.loads(raw)
        except ValueError:
            raise InvalidToken("malformed token") from None
        if not isinstance(payload, dict):
            raise InvalidToken("malformed token")

        exp = payload.get("exp")
        if not _is_int(exp):
            raise InvalidToken("malformed token")
        if self._clock() >= exp:
            raise InvalidToken("token expired")

        user_id = payload.get("user_id")
        if not _is_int(user_id):
            raise InvalidToken("invalid subject")
        return user_id


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
