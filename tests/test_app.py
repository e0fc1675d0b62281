"""
Tests for application wiring and settings.
"""

import pytest

from config.settings import DEV_JWT_SECRET, Settings
from main import create_app


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_ensures_schema_and_shutdown_closes(self, settings, store):
        app = create_app(settings, store=store)

        async with app.router.lifespan_context(app):
            assert store.schema_calls == 1
            assert not store.closed

        assert store.closed

    def test_services_share_configured_secret(self, settings, store):
        app = create_app(settings, store=store)
        services = app.state.services
        assert services.store is store
        assert services.hasher.rounds == 4
        token = services.tokens.issue(9)
        assert services.tokens.validate(token) == 9


class TestSettings:
    @pytest.mark.parametrize(
        "url",
        [
            "postgres://u:p@db:5432/app",
            "postgresql://u:p@db:5432/app",
            "postgresql+asyncpg://u:p@db:5432/app",
        ],
    )
    def test_database_url_uses_asyncpg(self, url):
        assert Settings(database_url=url).database_url == "postgresql+asyncpg://u:p@db:5432/app"

    def test_sslmode_translated(self):
        settings = Settings(database_url="postgres://u:p@db:5432/app?sslmode=disable")
        assert settings.database_url.endswith("?ssl=disable")

    def test_dev_secret_detection(self):
        assert Settings(jwt_secret=DEV_JWT_SECRET).uses_dev_secret
        assert not Settings(jwt_secret="prod").uses_dev_secret

    def test_defaults(self, monkeypatch):
        for var in ("PORT", "JWT_EXPIRY_SECONDS", "BCRYPT_ROUNDS"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings()
        assert settings.port == 8080
        assert settings.jwt_expiry_seconds == 7 * 24 * 3600
        assert settings.bcrypt_rounds == 12
