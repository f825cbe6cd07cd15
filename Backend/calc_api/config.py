"""Configuration module for environment-driven settings."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent / ".env",
        env_file_encoding="utf-8",
        env_prefix="CALC_",
        extra="ignore",
    )

    # Core service metadata
    project_name: str = Field(default="Calculator Service")
    environment: Literal["local", "dev", "prod"] = Field(default="local")
    api_prefix: str = Field(default="/api")

    # Logging
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    enable_access_log: bool = Field(default=True)

    # HTTP
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
