"""Client-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "0.4.0"


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["local", "dev", "prod"] = Field(default="local")
    log_level: str = Field(default="INFO")

    # Voice API endpoint
    nexmo_api_base_url: str = Field(
        default="https://api.nexmo.com",
        description="Scheme and host of the Voice API; resource paths are appended.",
    )

    # Credentials
    nexmo_api_key: str | None = Field(default=None)
    nexmo_api_secret: str | None = Field(default=None)
    nexmo_api_token: str | None = Field(
        default=None,
        description="Pre-issued bearer token (application JWT). Takes precedence over key/secret.",
    )

    # HTTP behaviour
    nexmo_request_timeout: float = Field(default=30.0, gt=0.0)
    nexmo_user_agent: str = Field(default=f"nexmo-calls-python/{SDK_VERSION}")

    # Collections
    nexmo_search_page_size: int = Field(default=10, ge=1, le=100)

    @field_validator("nexmo_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("nexmo_api_base_url must be an http(s) URL")
        return value.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.nexmo_api_token or (self.nexmo_api_key and self.nexmo_api_secret))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
