"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import (
    BusyTimeoutMs,
    ConnectionTimeoutS,
    MarketCode,
    MaxTokens,
    PortInt,
    RequestTimeoutS,
    TemperatureFloat,
)


class DatabaseSettings(BaseModel):
    """Database configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    url: str = Field(
        default="sqlite:///data/moodtune.db",
        validation_alias=AliasChoices("url", "database_url", "db_url"),
    )
    busy_timeout_ms: BusyTimeoutMs = Field(
        default=5000,
        validation_alias=AliasChoices("busy_timeout_ms", "busy_timeout"),
    )
    connection_timeout_s: ConnectionTimeoutS = Field(
        default=10,
        validation_alias=AliasChoices("connection_timeout_s", "connection_timeout"),
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate database URL format."""
        if not v.startswith("sqlite://"):
            raise ValueError(ErrorMessages.INVALID_DATABASE_URL)
        return v


class CatalogSettings(BaseModel):
    """Music catalog (Spotify Web API) configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    client_id: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_id", "spotify_client_id"),
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_secret", "spotify_client_secret"),
    )
    accounts_url: str = "https://accounts.spotify.com"
    api_url: str = "https://api.spotify.com/v1"
    market: MarketCode = "US"
    request_timeout_s: RequestTimeoutS = Field(
        default=8.0,
        validation_alias=AliasChoices("request_timeout_s", "request_timeout"),
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id.get_secret_value() and self.client_secret.get_secret_value())


class AISettings(BaseModel):
    """AI mood analysis configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("api_key", "openai_api_key", "openai_key"),
    )
    model: str = Field(
        default="openai:gpt-4o", validation_alias=AliasChoices("model", "ai_model", "openai_model")
    )
    max_tokens: MaxTokens = 500
    temperature: TemperatureFloat = 0.7
    affirmation_max_tokens: MaxTokens = 100
    affirmation_temperature: TemperatureFloat = 0.8


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True)

    host: str = "0.0.0.0"
    port: PortInt = 5000
    cors_origins: tuple[str, ...] = ("http://localhost:5173",)
    cors_origin_regex: str | None = None

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_origins(cls, v: tuple[str, ...] | list[str] | str) -> tuple[str, ...]:
        """Accept comma-separated strings and JSON arrays."""
        if isinstance(v, str):
            return tuple(part.strip() for part in v.split(",") if part.strip())
        if isinstance(v, list):
            return tuple(v)
        return v


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DATABASE__URL (nested with ``__`` delimiter)
    - CATALOG__CLIENT_ID, CATALOG__CLIENT_SECRET, CATALOG__MARKET
    - AI__API_KEY, AI__MODEL
    - SERVER__PORT, SERVER__CORS_ORIGINS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        strict=True,
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    ai: AISettings = Field(default_factory=AISettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
