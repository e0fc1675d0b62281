"""
Pydantic schemas shared by the store, the use cases and the HTTP routes.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════════
# Store records
# ═══════════════════════════════════════════════════════════════════════════════


class UserRecord(BaseModel):
    """A stored user, including the bcrypt digest.  Never serialised to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime


class FeedTweet(BaseModel):
    """A tweet joined with its author's username."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    content: str
    created_at: datetime
    username: str


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP request / response bodies
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class TweetRequest(BaseModel):
    content: str


class CreatedResponse(BaseModel):
    id: int


class TokenResponse(BaseModel):
    token: str
