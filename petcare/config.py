"""Application configuration using Pydantic Settings."""

import os
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ASYNC_DRIVER_PREFIX = "sqlite+aiosqlite://"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./petcare.db",
        description="Database URL with an async driver (aiosqlite by default)"
    )
    create_tables_on_startup: bool = Field(
        default=False,
        description="Create missing tables at startup instead of relying on Alembic"
    )

    # Authentication Configuration
    secret_key: str = Field(
        ...,
        min_length=32,
        description="Secret key for JWT token generation"
    )
    jwt_lifetime_seconds: int = Field(
        default=86400,
        ge=300,
        le=86400,
        description="JWT token lifetime in seconds (5 min to 24 hours)"
    )

    # Application Configuration
    app_name: str = Field(
        default="Pet Care API",
        description="Application name"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins"
    )

    # Server Configuration
    host: str = Field(
        default="0.0.0.0",
        description="Server host"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port"
    )

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("TESTING") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that the database URL uses an async driver."""
        if not v.startswith(ASYNC_DRIVER_PREFIX):
            raise ValueError(
                "DATABASE_URL must use an async driver "
                "(sqlite+aiosqlite://)"
            )
        return v

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate that secret key is sufficiently long."""
        if len(v) < 32:
            raise ValueError(
                "SECRET_KEY must be at least 32 characters long for security"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_allowed_origins_list(self) -> List[str]:
        """Parse allowed origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
