"""
Tweet routes.  Both require a valid bearer token, checked before the body is read.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from api.dependencies import Services, get_services
from auth.dependencies import AuthenticatedRoute, get_auth_context
from auth.models import AuthContext
from core import timeline
from utils.schemas import CreatedResponse, FeedTweet, TweetRequest

router = APIRouter(tags=["tweets"], route_class=AuthenticatedRoute)


@router.post("/tweets", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_tweet(
    req: TweetRequest,
    auth: AuthContext = Depends(get_auth_context),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    tweet_id = await timeline.create_tweet(services.store, auth, req.content)
    return {"id": tweet_id}


@router.get("/feed", response_model=List[FeedTweet])
async def get_feed(
    auth: AuthContext = Depends(get_auth_context),
    services: Services = Depends(get_services),
) -> List[FeedTweet]:
    """Latest tweets across all users."""
    return await timeline.get_feed(services.store)
