"""
Account use cases — signup and login.

bcrypt work is pushed to a worker thread so a slow hash only suspends the
calling request, not the event loop.
"""

from __future__ import annotations

import asyncio
import logging

from auth.password import MAX_PASSWORD_BYTES, PasswordHasher
from auth.tokens import TokenService
from database.store import TweetStore
from utils.errors import AuthenticationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MAX_USERNAME_LENGTH = 30
MAX_EMAIL_LENGTH = 255


async def signup(
    store: TweetStore,
    hasher: PasswordHasher,
    username: str,
    email: str,
    password: str,
) -> int:
    """Register a new user and return its id.

    Raises ``ValidationError`` for empty or oversized fields and
    ``ConflictError`` when the username or email is taken.
    """
    if not username or not email or not password:
        raise ValidationError("missing fields")
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(f"username longer than {MAX_USERNAME_LENGTH} characters")
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(f"email longer than {MAX_EMAIL_LENGTH} characters")
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"password longer than {MAX_PASSWORD_BYTES} bytes")

    password_hash = await asyncio.to_thread(hasher.hash, password)
    user_id = await store.create_user(username, email, password_hash)
    logger.info("Registered user %s (%s)", username, user_id)
    return user_id


async def login(
    store: TweetStore,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str,
    password: str,
) -> str:
    """Check credentials and issue a token.

    Unknown email and wrong password fail identically.
    """
    try:
        user = await store.find_user_by_email(email)
    except NotFoundError:
        await asyncio.to_thread(hasher.verify_dummy, password)
        logger.info("Login failed: unknown email")
        raise AuthenticationError("invalid credentials") from None

    if not await asyncio.to_thread(hasher.verify, password, user.password_hash):
        logger.info("Login failed for user %s: bad password", user.id)
        raise AuthenticationError("invalid credentials")

    token = tokens.issue(user.id)
    logger.info("Login: %s (%s)", user.username, user.id)
    return token
