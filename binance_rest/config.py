"""Client configuration loaded from the environment."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BINANCE_URL
from .errors import UrlParseError
from .guards import MAX_RECV_WINDOW, assert_base_url


class Settings(BaseSettings):
    """Credentials and transport settings read from ``BINANCE_*`` variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: Optional[str] = Field(default=None, alias="BINANCE_API_KEY")
    secret_key: Optional[SecretStr] = Field(default=None, alias="BINANCE_SECRET_KEY")
    base_url: str = Field(BINANCE_URL, alias="BINANCE_BASE_URL")
    timeout: float = Field(10.0, alias="BINANCE_TIMEOUT", gt=0)
    connect_timeout: float = Field(5.0, alias="BINANCE_CONNECT_TIMEOUT", gt=0)
    recv_window: Optional[int] = Field(
        default=None, alias="BINANCE_RECV_WINDOW", ge=1, le=MAX_RECV_WINDOW
    )

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        try:
            assert_base_url(value)
        except UrlParseError as exc:
            raise ValueError(str(exc)) from exc
        return value.rstrip("/")

    @property
    def secret(self) -> Optional[str]:
        return self.secret_key.get_secret_value() if self.secret_key else None


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""

    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings"]
