"""
config.py — pydantic-settings Settings class.

All environment variables for the notary platform are declared here.
The client library, the CLI and the portal import `settings` from this module.

Usage:
    from notary_shared.config import settings
    print(settings.api_base_url)
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_dotenv() -> Path | None:
    """Walk up from CWD to find the nearest .env file."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        candidate = parent / ".env"
        if candidate.is_file():
            return candidate
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_find_dotenv() or ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Backend REST API
    # -------------------------------------------------------------------------
    api_base_url: str = Field(default="http://localhost:8830/api")
    api_timeout: float = Field(default=30.0)
    token_store_path: Path = Field(
        default_factory=lambda: Path.home() / ".notary" / "session.json"
    )

    # Seconds a cached GET stays fresh before it is refetched
    cache_stale_seconds: float = Field(default=30.0)

    # Read retries (mutations are never retried)
    read_retry_attempts: int = Field(default=3)
    read_retry_base_delay: float = Field(default=1.0)

    # -------------------------------------------------------------------------
    # Office
    # -------------------------------------------------------------------------
    office_timezone: str = Field(default="Asia/Ho_Chi_Minh")

    # -------------------------------------------------------------------------
    # Mock upload
    # -------------------------------------------------------------------------
    upload_storage_url: str = Field(default="https://storage.example.com")
    upload_delay_seconds: float = Field(default=1.0)

    # -------------------------------------------------------------------------
    # Portal server
    # -------------------------------------------------------------------------
    portal_host: str = Field(default="0.0.0.0")
    portal_port: int = Field(default=8840)
    cors_origins: str = Field(default="http://localhost:5173,http://localhost:5174")

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")

    # -------------------------------------------------------------------------
    # Derived / computed
    # -------------------------------------------------------------------------
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @field_validator("api_base_url", "upload_storage_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") if isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Module-level singleton, import this everywhere
# ---------------------------------------------------------------------------
settings = Settings()
