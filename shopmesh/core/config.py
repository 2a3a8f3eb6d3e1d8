"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """Relational store configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./shopmesh.db",
        alias="SHOPMESH_DATABASE_URL",
        description="Async SQLAlchemy connection URL",
    )
    echo: bool = Field(
        default=False, alias="SHOPMESH_DATABASE_ECHO", description="Echo emitted SQL through the engine logger"
    )

    model_config = {"populate_by_name": True}


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./shopmesh.db",
        description="Async SQLAlchemy connection URL (sqlite+aiosqlite or postgresql)",
        alias="SHOPMESH_DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL through the engine logger",
        alias="SHOPMESH_DATABASE_ECHO",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SHOPMESH_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="SHOPMESH_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="SHOPMESH_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG-level logs to <log_file_dir>/shopmesh.log",
        alias="SHOPMESH_ENABLE_FILE_LOGGING",
    )

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
