"""
Configuration settings for the Marketplace backend
Loads from environment variables and .env file.
"""

import json
from typing import Any, List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__

STORAGE_BACKENDS = ("memory", "sql")


class Settings(BaseSettings):
    """
    Application settings.

    Every field can be set from the environment through its alias.
    """

    # App info
    app_name: str = "Marketplace Catalog API"
    version: str = __version__
    description: str = "Product catalog with cached search and audit trail"
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Storage
    storage_backend: str = Field(default="memory", alias="STORAGE_BACKEND")
    database_url: str = Field(default="sqlite:///./marketplace.db", alias="DATABASE_URL")
    db_echo: bool = Field(default=False, alias="DB_ECHO")

    # Bootstrap
    seed_admin: bool = Field(default=True, alias="SEED_ADMIN")
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_password: str = Field(default="admin", alias="ADMIN_PASSWORD")

    # Server settings
    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")

    # CORS settings
    cors_origins: Union[List[str], str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        alias="API_CORS_ORIGINS",
    )

    # Logging
    log_level: str = Field(default="INFO", alias="API_LOG_LEVEL")
    slow_operation_ms: float = Field(default=300.0, alias="SLOW_OPERATION_MS")

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """Only the known store implementations can be selected."""
        normalized = v.strip().lower()
        if normalized not in STORAGE_BACKENDS:
            raise ValueError(
                f"storage_backend must be one of {', '.join(STORAGE_BACKENDS)}, got '{v}'"
            )
        return normalized

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> List[str]:
        """Parse CORS origins from JSON string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # Fall back to comma-separated list
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get global settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
