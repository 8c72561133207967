"""Typed settings loader for the surf forecast service."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyUrl, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    stormglass_api_url: AnyUrl = Field(
        default=AnyUrl("https://api.stormglass.io/v2"),
        alias="STORMGLASS_API_URL",
    )
    stormglass_api_token: str = Field(alias="STORMGLASS_API_TOKEN", repr=False)
    stormglass_timeout_seconds: float = Field(default=15.0, alias="STORMGLASS_TIMEOUT_SECONDS")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="LOG_LEVEL"
    )

    @model_validator(mode="after")
    def validate_stormglass(self) -> Settings:
        """Validate provider credentials and request limits."""
        if not self.stormglass_api_token.strip():
            raise ValueError("STORMGLASS_API_TOKEN must not be empty.")
        if self.stormglass_timeout_seconds <= 0:
            raise ValueError("STORMGLASS_TIMEOUT_SECONDS must be > 0.")
        if self.stormglass_api_url.scheme not in {"http", "https"}:
            raise ValueError("STORMGLASS_API_URL must use http or https.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "app_env": self.app_env,
            "stormglass_api_url": str(self.stormglass_api_url),
            "stormglass_timeout_seconds": self.stormglass_timeout_seconds,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        # Error inputs are left out so the API token never lands in the message.
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
