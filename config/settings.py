"""
Application settings loaded from environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEV_JWT_SECRET = "supersecretchange"


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/twitter_dev"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_recycle: int = 3600

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEV_JWT_SECRET      # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 604800      # 7 days
    bcrypt_rounds: int = 12               # bcrypt work factor

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8080
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @field_validator("database_url")
    @classmethod
    def _use_asyncpg_driver(cls, value: str) -> str:
        """Accept plain ``postgres://`` URLs as handed out by docker / PaaS."""
        for prefix in ("postgres://", "postgresql://"):
            if value.startswith(prefix):
                value = "postgresql+asyncpg://" + value[len(prefix):]
                break
        # asyncpg names the libpq ``sslmode`` parameter ``ssl``
        return value.replace("sslmode=", "ssl=")

    @property
    def uses_dev_secret(self) -> bool:
        return self.jwt_secret == DEV_JWT_SECRET
