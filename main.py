"""
Chirp — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import Services
from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as tweets_router
from auth.password import PasswordHasher
from auth.routes import router as auth_router
from auth.tokens import TokenService
from config.settings import Settings
from database.store import TweetStore

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("asyncio", "sqlalchemy.engine", "sqlalchemy.pool"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TweetStore] = None,
) -> FastAPI:
    settings = settings or Settings()
    services = Services(
        settings=settings,
        store=store or TweetStore.from_settings(settings),
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=TokenService(settings.jwt_secret, expiry_seconds=settings.jwt_expiry_seconds),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.uses_dev_secret:
            logger.warning("JWT_SECRET is unset; using the development default")
        logger.info("Ensuring database schema…")
        await services.store.ensure_schema()
        logger.info("Application ready to accept requests.")
        try:
            yield
        finally:
            await services.store.close()

    app = FastAPI(
        title="Chirp",
        version="1.0.0",
        description="Minimal social backend: accounts and a global tweet feed.",
        lifespan=lifespan,
    )
    app.state.services = services

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(tweets_router)

    return app


if __name__ == "__main__":
    settings = Settings()
    configure_logging(settings.debug)
    logger.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
