"""Configuration management for ASCII Oracle."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ORACLE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend Configuration
    api_base: str | None = Field(None, description="Backend base URL for math and search services")
    request_timeout_seconds: float = Field(default=10.0, gt=0, description="Timeout for backend requests")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["default", "chat"] = Field(default="default", description="Log profile")

    @field_validator("api_base")
    @classmethod
    def _normalize_api_base(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip().rstrip("/")
        if not normalized:
            return None
        if not normalized.startswith(("http://", "https://")):
            raise ValueError("api_base must be an http(s) URL")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
