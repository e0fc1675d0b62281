"""
Data store — persistence for users and tweets.

Every public call runs in its own session and transaction.  Backend
failures are translated into the application error taxonomy here so the
use cases never see driver exceptions.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from config.settings import Settings
from database.models import Base, Tweet, User
from database.session import build_engine, build_session_factory
from utils.errors import ConflictError, NotFoundError, StoreUnavailable
from utils.schemas import FeedTweet, UserRecord

logger = logging.getLogger(__name__)


class TweetStore:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: Optional[AsyncEngine] = None,
    ) -> None:
        self._session_factory = session_factory
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "TweetStore":
        engine = build_engine(settings)
        return cls(build_session_factory(engine), engine=engine)

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session, commit on success, roll back on any error."""
        try:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except IntegrityError:
            raise
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Store operation failed: %s", exc)
            raise StoreUnavailable() from exc

    # ── Schema ───────────────────────────────────────────────────────────

    async def ensure_schema(self) -> None:
        """Create ``users``, ``tweets`` and the feed index if absent (idempotent)."""
        if self._engine is None:
            raise RuntimeError("TweetStore has no engine bound; cannot create schema")
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Schema creation failed: %s", exc)
            raise StoreUnavailable() from exc
        logger.info("Database schema ready")

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()

    # ── Users ────────────────────────────────────────────────────────────

    async def create_user(self, username: str, email: str, password_hash: str) -> int:
        """Insert a user; a unique violation on username or email is a conflict."""
        user = User(username=username, email=email, password_hash=password_hash)
        try:
            async with self._transaction() as session:
                session.add(user)
                await session.flush()
                user_id = user.id
        except IntegrityError as exc:
            raise ConflictError("username or email exists") from exc
        return user_id

    async def find_user_by_email(self, email: str) -> UserRecord:
        async with self._transaction() as session:
            result = await session.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
            if user is None:
                raise NotFoundError("user not found")
            return UserRecord.model_validate(user)

    # ── Tweets ───────────────────────────────────────────────────────────

    async def create_tweet(self, user_id: int, content: str) -> int:
        """Insert a tweet owned by ``user_id``; an unknown owner is ``NotFoundError``."""
        tweet = Tweet(user_id=user_id, content=content)
        try:
            async with self._transaction() as session:
                session.add(tweet)
                await session.flush()
                tweet_id = tweet.id
        except IntegrityError as exc:
            raise NotFoundError("user not found") from exc
        return tweet_id

    async def list_recent_tweets(self, limit: int) -> List[FeedTweet]:
        """Newest-first snapshot of at most ``limit`` tweets with author usernames."""
        stmt = (
            select(Tweet.id, Tweet.user_id, Tweet.content, Tweet.created_at, User.username)
            .join(User, User.id == Tweet.user_id)
            .order_by(Tweet.created_at.desc(), Tweet.id.desc())
            .limit(limit)
        )
        async with self._transaction() as session:
            result = await session.execute(stmt)
            rows = result.all()
        return [FeedTweet.model_validate(dict(row._mapping)) for row in rows]
