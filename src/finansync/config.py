"""
Centralized configuration management.
All environment variables and settings are defined here.

Settings are built once at startup and passed to the components that need
them; nothing reads them from a module-level global.
"""
import base64
import binascii
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from FINANSYNC_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FINANSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="finansync")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # Storage
    db_path: Optional[str] = Field(default=None)

    # Authentication
    jwt_secret: str = Field(..., description="Base64-encoded HMAC-SHA-256 key")
    jwt_expiration_minutes: int = Field(default=60)

    # Pagination
    default_page_size: int = Field(default=10)
    max_page_size: int = Field(default=100)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Validate the signing key is non-empty base64."""
        try:
            key = base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("JWT secret must be base64-encoded")
        if not key:
            raise ValueError("JWT secret must not be empty")
        return v

    @field_validator("jwt_expiration_minutes", "default_page_size", "max_page_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counters that must be at least 1."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @property
    def jwt_key(self) -> bytes:
        """Raw signing key bytes decoded from ``jwt_secret``."""
        return base64.b64decode(self.jwt_secret)
