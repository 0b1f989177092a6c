"""
Configuration settings for Brixie.

This module provides configuration management using Pydantic settings
with support for environment variables and .env files.
"""

from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from brixie import USER_AGENT

DEFAULT_BASE_URL = "https://rebrickable.com/api/v3/lego/"


class BrixieSettings(BaseSettings):
    """
    Main configuration settings for Brixie.

    Settings are loaded from multiple sources in order of preference:
    1. Explicit keyword arguments
    2. Environment variables (prefixed with BRIXIE_)
    3. .env file in the working directory
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="BRIXIE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_key: Optional[str] = Field(
        default=None,
        description="Rebrickable API key"
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Rebrickable LEGO catalog API",
        min_length=8
    )

    user_agent: str = Field(
        default=USER_AGENT,
        description="User-Agent header sent with every request",
        min_length=1
    )

    # None leaves the transport's own default in place
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds",
        gt=0
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode (logs every HTTP request and response)"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL ends with a slash so relative paths resolve under it."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL '{v}'. Must start with http:// or https://")
        return v if v.endswith("/") else f"{v}/"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self.api_key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary, excluding sensitive data."""
        data = self.model_dump()
        if data.get("api_key"):
            data["api_key"] = "***masked***"
        return data


def get_settings(**overrides: Any) -> BrixieSettings:
    """Get the current Brixie settings, with optional explicit overrides."""
    return BrixieSettings(**{k: v for k, v in overrides.items() if v is not None})
