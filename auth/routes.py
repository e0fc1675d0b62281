"""
Auth API routes — signup, login.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from api.dependencies import Services, get_services
from core import accounts
from utils.schemas import CreatedResponse, LoginRequest, SignupRequest, TokenResponse

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    req: SignupRequest,
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """Register a new user."""
    user_id = await accounts.signup(
        services.store, services.hasher, req.username, req.email, req.password,
    )
    return {"id": user_id}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: LoginRequest,
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """Login with email + password."""
    token = await accounts.login(
        services.store, services.hasher, services.tokens, req.email, req.password,
    )
    return {"token": token}
