"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.access.roles import Role
from ..domain.shared.constants import PlayerConstants
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import BusyTimeoutMs, ConnectionTimeoutS, PortInt


class DatabaseSettings(BaseModel):
    """Database configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="sqlite:///data/player.db",
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


class ApiSettings(BaseModel):
    """HTTP server configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    host: str = "127.0.0.1"
    port: PortInt = 8000
    # Comma-separated list of allowed browser origins.
    cors_origins: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("cors_origins", "allowed_origins"),
    )

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


class TokenGrant(BaseModel):
    """Identity bound to a static bearer token."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    role: Role = Role.USER


class AuthSettings(BaseModel):
    """Static bearer-token identity configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tokens: dict[str, TokenGrant] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("tokens", "api_tokens"),
    )


class PlayerSettings(BaseModel):
    """Playback and history limits."""

    model_config = ConfigDict(frozen=True)

    history_default_limit: int = Field(
        default=PlayerConstants.DEFAULT_HISTORY_LIMIT,
        ge=1,
        le=PlayerConstants.MAX_HISTORY_LIMIT,
    )
    history_max_limit: int = Field(
        default=PlayerConstants.MAX_HISTORY_LIMIT,
        ge=1,
        le=PlayerConstants.MAX_HISTORY_LIMIT,
    )


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DATABASE__URL, API__PORT, etc. (nested with "__")
    - AUTH__TOKENS as a JSON object: {"<token>": {"user_id": "...", "role": "admin"}}
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)

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
