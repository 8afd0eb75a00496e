"""
Settings for building a Laneful client from the environment.

Values are read from ``LANEFUL_*`` environment variables or a ``.env`` file:

    LANEFUL_BASE_URL=https://api.example.com
    LANEFUL_AUTH_TOKEN=...

Request timeout and TLS verification are fixed by the client and are not
settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LanefulSettings(BaseSettings):
    """Connection settings for the Laneful API."""

    model_config = SettingsConfigDict(
        env_prefix="LANEFUL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: Optional[str] = None
    auth_token: Optional[SecretStr] = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().rstrip("/")
        return v or None

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url) and bool(
            self.auth_token and self.auth_token.get_secret_value()
        )


@lru_cache
def get_settings() -> LanefulSettings:
    """Return the process-wide settings, loaded once."""
    return LanefulSettings()
