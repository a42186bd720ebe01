"""Configuration loading for the Gatekeeper system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

import hashlib
from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatekeeper.core.models import Weekday


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Admission configuration
    admission_fee: Decimal = Field(
        default=Decimal("100"),
        description="Flat fee charged per admitted visitor",
    )
    free_day: str = Field(
        default="friday",
        description="Day of the week on which women enter free (ladies' night)",
    )

    # Credential configuration
    digest_algorithm: str = Field(
        default="sha256",
        description="hashlib algorithm used to digest presented secrets",
    )
    digest_salt: str = Field(
        default="",
        description="Static salt prefixed to secrets before digesting",
    )
    credentials: dict[str, str] = Field(
        default_factory=dict,
        description="Identifier to stored digest mapping (JSON object)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("admission_fee")
    @classmethod
    def validate_admission_fee(cls, v: Decimal) -> Decimal:
        """Ensure admission fee is non-negative."""
        if v < 0:
            raise ValueError("admission_fee must be non-negative")
        return v

    @field_validator("free_day")
    @classmethod
    def validate_free_day(cls, v: str) -> str:
        """Ensure free day names a day of the week."""
        return Weekday.parse(v).name.lower()

    @field_validator("digest_algorithm")
    @classmethod
    def validate_digest_algorithm(cls, v: str) -> str:
        """Ensure digest algorithm is available in hashlib."""
        if v not in hashlib.algorithms_available:
            raise ValueError(f"digest_algorithm {v!r} is not available")
        return v

    @property
    def free_weekday(self) -> Weekday:
        return Weekday.parse(self.free_day)


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
