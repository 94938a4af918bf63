"""Настройки Bookify, читаемые из окружения (префикс BOOKIFY_) и .env."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class BookifySettings(BaseSettings):
    """Настройки приложения."""

    service_name: str = Field(default="bookify", min_length=1)
    environment: str = Field(default="development")
    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(
        env_prefix="BOOKIFY_", env_file=".env", extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache(maxsize=1)
def get_settings() -> BookifySettings:
    """Возвращает закэшированный экземпляр настроек."""
    return BookifySettings()
