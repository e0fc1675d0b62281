"""
Authentication gate for protected routes.

Routes registered with :class:`AuthenticatedRoute` check the bearer token
before FastAPI reads or validates the request body, so an unauthenticated
request is always answered with 401.  ``get_auth_context`` then hands the
resulting :class:`AuthContext` to the endpoint.
"""

from __future__ import annotations

from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute

from auth.models import AuthContext
from utils.errors import AuthenticationError

_BEARER_PREFIX = "Bearer "


def authenticate(request: Request) -> AuthContext:
    """
    Extract and verify the Bearer token from the Authorization header.
    Records the authenticated user's context on ``request.state.auth``.
    """
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise AuthenticationError("missing auth")
    token = authorization[len(_BEARER_PREFIX):]
    user_id = request.app.state.services.tokens.validate(token)

    context = AuthContext(user_id=user_id)
    request.state.auth = context
    return context


class AuthenticatedRoute(APIRoute):
    """Route class that rejects unauthenticated requests before body parsing."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            authenticate(request)
            return await handler(request)

        return gated_handler


async def get_auth_context(request: Request) -> AuthContext:
    """Authenticated context for the current request."""
    context = getattr(request.state, "auth", None)
    if context is None:
        context = authenticate(request)
    return context
