"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The admin secret comes from the environment (the default is a placeholder)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: a local SQLite file works out-of-the-box
    - DATABASE_URL=memory:// selects the in-memory store (nothing persisted)
    - Only the stdlib SQLite driver ships with the package; another
      SQLAlchemy URL needs its driver installed separately
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from marketplace.core.credentials import MAX_SECRET_BYTES, secret_fits


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    database_url: str = "sqlite:///./marketplace.db"

    seed_demo_listings: bool = True

    # Admin credential (single identity)
    admin_username: str = "admin"
    admin_password: str = "change-me"

    @field_validator("admin_password")
    @classmethod
    def admin_password_fits_hash(cls, v: str) -> str:
        if not secret_fits(v):
            raise ValueError(
                f"admin_password must be at most {MAX_SECRET_BYTES} bytes in UTF-8",
            )
        return v

    # bcrypt cost factor
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    # Listings
    placeholder_photo_url: str = "https://picsum.photos/seed/newbook/400/600"

    # Admin dashboard refresh
    stats_refresh_seconds: float = Field(30.0, gt=0)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
