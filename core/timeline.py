"""
Tweet use cases — posting and the flat global feed.
"""

from __future__ import annotations

import logging
from typing import List

from auth.models import AuthContext
from database.store import TweetStore
from utils.errors import AuthenticationError, NotFoundError, ValidationError
from utils.schemas import FeedTweet

logger = logging.getLogger(__name__)

MAX_TWEET_LENGTH = 280
FEED_LIMIT = 50


async def create_tweet(store: TweetStore, auth: AuthContext, content: str) -> int:
    """Persist a tweet owned by the authenticated user and return its id."""
    if not 1 <= len(content) <= MAX_TWEET_LENGTH:
        raise ValidationError("content length invalid")
    try:
        tweet_id = await store.create_tweet(auth.user_id, content)
    except NotFoundError:
        # valid signature, but the subject has since disappeared
        raise AuthenticationError("unknown user") from None
    logger.debug("User %s posted tweet %s", auth.user_id, tweet_id)
    return tweet_id


async def get_feed(store: TweetStore, limit: int = FEED_LIMIT) -> List[FeedTweet]:
    """Most recent tweets system-wide, newest first."""
    return await store.list_recent_tweets(limit)
