"""
Configuration module for the application.

Provides type-safe settings using Pydantic.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kakeibo.domain.values.pagination import (
    PAGINATION_MAX_LIMIT,
    PAGINATION_MIN_LIMIT,
)
from kakeibo.infrastructure.logger.interfaces import ILoggingConfig


class LoggingConfig(BaseSettings):
    """Configuration for the logging system."""

    model_config = SettingsConfigDict(
        env_prefix="KAKEIBO_LOGGER__", extra="ignore"
    )

    app_name: str = "Kakeibo"
    debug: bool = True  # if True then color console render, else json render
    log_level: str = "INFO"
    enable_file_logging: bool = False
    logs_dir: Path = Path("logs")
    logs_file_name: str = "kakeibo.log"
    max_file_size_mb: int = Field(default=10, ge=1)
    backup_count: int = Field(default=5, ge=0)

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class LedgerConfig(BaseSettings):
    """Defaults applied by the transaction and category use cases."""

    model_config = SettingsConfigDict(
        env_prefix="KAKEIBO_LEDGER__", extra="ignore"
    )

    default_page_limit: int = Field(
        default=20,
        ge=PAGINATION_MIN_LIMIT,
        le=PAGINATION_MAX_LIMIT,
        description="Page size used when a listing does not specify one",
    )
    default_order: Literal["asc", "desc"] = Field(
        default="desc",
        description="Sort direction used when a listing does not specify one",
    )
    default_category_page_limit: int = Field(
        default=30,
        ge=PAGINATION_MIN_LIMIT,
        le=PAGINATION_MAX_LIMIT,
        description="Page size of category listings without per_page",
    )


class AppConfig(BaseSettings):
    """Main application configuration."""

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    logger: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="KAKEIBO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    @property
    def logger_adapter(self) -> ILoggingConfig:
        """
        Create logging configuration adapter from settings.

        Returns:
            ILoggingConfig: Configuration object for the logging system.
        """
        return self.logger


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()
