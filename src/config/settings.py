from __future__ import annotations

from functools import lru_cache
from typing import Literal
import logging

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models import MAX_RECV_WINDOW_MS, ClientConfig, Credentials

PRODUCTION_BASE_URL = "https://api.binance.com"
TESTNET_BASE_URL = "https://testnet.binance.vision"


class Settings(BaseSettings):
    """Connector settings loaded from environment variables."""

    BINANCE_API_KEY: str | None = None
    BINANCE_API_SECRET: str | None = None
    BINANCE_TESTNET: bool = Field(
        default=False,
        validation_alias=AliasChoices("BINANCE_TESTNET", "PAPER_TRADING"),
    )
    BINANCE_BASE_URL: str | None = None

    RECV_WINDOW_MS: int | None = None
    HTTP_TIMEOUT: float = 10.0
    SYNC_TIME: bool = False
    SAFETY_MS: int = 300

    LOG_LEVEL: str = "INFO"
    LOG_MODE: Literal["plain", "json"] = "plain"
    DEBUG_MODE: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("RECV_WINDOW_MS")
    @classmethod
    def _recv_window_in_range(cls, value: int | None) -> int | None:
        if value is not None and not 0 < value <= MAX_RECV_WINDOW_MS:
            raise ValueError(f"RECV_WINDOW_MS must be in (0, {MAX_RECV_WINDOW_MS}]")
        return value

    @field_validator("HTTP_TIMEOUT")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")
        return value

    @property
    def base_url(self) -> str:
        if self.BINANCE_BASE_URL:
            return self.BINANCE_BASE_URL.rstrip("/")
        return TESTNET_BASE_URL if self.BINANCE_TESTNET else PRODUCTION_BASE_URL


@lru_cache
def load_settings() -> Settings:
    """Load settings from the environment or a ``.env`` file.

    The result is cached; environment changes made afterwards are not seen
    until ``load_settings.cache_clear()`` is called.
    """
    settings = Settings()
    logging.getLogger(__name__).info(
        "BINANCE_TESTNET=%s domain=%s", settings.BINANCE_TESTNET, settings.base_url
    )
    return settings


def build_client_config(settings: Settings, timestamp_offset_ms: int = 0) -> ClientConfig:
    """Return the immutable :class:`ClientConfig` described by ``settings``."""
    return ClientConfig(
        base_url=settings.base_url,
        credentials=Credentials(
            api_key=settings.BINANCE_API_KEY,
            api_secret=settings.BINANCE_API_SECRET,
        ),
        recv_window=settings.RECV_WINDOW_MS,
        timestamp_offset_ms=timestamp_offset_ms,
    )
