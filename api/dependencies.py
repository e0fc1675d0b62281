"""
FastAPI dependencies (shared across routes).

The long-lived collaborators are built once in ``main.create_app`` and
parked on ``app.state.services``; routes reach them only through
:func:`get_services`.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from auth.password import PasswordHasher
from auth.tokens import TokenService
from config.settings import Settings
from database.store import TweetStore


@dataclass(frozen=True)
class Services:
    settings: Settings
    store: TweetStore
    hasher: PasswordHasher
    tokens: TokenService


def get_services(request: Request) -> Services:
    return request.app.state.services
