"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a short, human-readable
message.  Lower layers (store, token service) raise these directly; the
exception handlers in ``api.middleware`` render them as JSON.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Optional


class AppError(Exception):
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    message: str = "internal error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or type(self).message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message}


class ValidationError(AppError):
    status = HTTPStatus.BAD_REQUEST
    message = "bad request"


class AuthenticationError(AppError):
    status = HTTPStatus.UNAUTHORIZED
    message = "invalid credentials"


class InvalidToken(AuthenticationError):
    message = "invalid token"


class NotFoundError(AppError):
    status = HTTPStatus.NOT_FOUND
    message = "not found"


class ConflictError(AppError):
    status = HTTPStatus.CONFLICT
    message = "conflict"


class StoreUnavailable(AppError):
    """Connectivity or unexpected backend failure in the data store."""

    message = "store unavailable"
