"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - mongo_uri is DATABASE_URL when set, else the Atlas URI built from DB_USER/DB_PASS

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box against
      a local frontend on http://localhost:5173
"""

from functools import lru_cache
from typing import Literal
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    db_user: str = ""
    db_pass: str = ""
    db_cluster: str = "cluster0.ya8cack.mongodb.net"
    database_url: str | None = None
    database_name: str = "car-doctor"

    # Auth
    access_token_secret: str = "change-me-access-token-secret"
    access_token_ttl_seconds: int = 60 * 60
    cookie_secure: bool = False
    cookie_samesite: Literal["lax", "strict", "none"] | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    # Legacy clients expect storage failures as 200 {error: true, message}
    storage_errors_as_ok: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def mongo_uri(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.db_cluster}/?retryWrites=true&w=majority"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
