"""
Environment configuration for the Company ERP API.

Uses Pydantic's settings management to load environment variables (and an
optional ``.env`` file) into a single typed object. The object is built once
at process start and handed to ``create_app``; components read what they need
from it instead of consulting the environment themselves.
"""

import json
import re
from datetime import timedelta
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> timedelta:
    """
    Parse a compact duration such as ``30d``, ``12h``, ``45m`` or ``3600``.

    A bare number is read as seconds.
    """
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(
            f"Invalid duration {value!r}; expected <number>[s|m|h|d]"
        )
    amount, unit = match.groups()
    seconds = int(amount) * _DURATION_UNITS[unit]
    if seconds <= 0:
        raise ValueError("Duration must be positive")
    return timedelta(seconds=seconds)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Company ERP API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    API_PREFIX: str = "/api"
    DOCS_URL: str = "/api-docs"
    CORS_ORIGINS: str = "*"

    # Database
    DATABASE_URL: str = "sqlite:///./company_erp.db"
    DB_POOL_SIZE: int = 5
    DB_POOL_OVERFLOW: int = 10

    # Security
    JWT_SECRET: str = Field(..., min_length=32)
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE: str = "30d"
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)

    # Payment provider
    STRIPE_SECRET_KEY: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    @field_validator("JWT_EXPIRE")
    @classmethod
    def validate_jwt_expire(cls, v: str) -> str:
        parse_duration(v)
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level {v!r}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in {"text", "json"}:
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return fmt

    @property
    def jwt_expires_delta(self) -> timedelta:
        """Lifetime of issued bearer tokens."""
        return parse_duration(self.JWT_EXPIRE)

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from a comma list or a JSON list."""
        raw = self.CORS_ORIGINS.strip()
        if raw.startswith("[") and raw.endswith("]"):
            try:
                return [str(origin) for origin in json.loads(raw)]
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
