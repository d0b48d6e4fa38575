"""Configuration settings for SnapKV."""

import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SNAPKV_",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIR: Path = Field(default=Path("./logs"), description="Directory for log files")

    # Store
    DEFAULT_TTL_SECONDS: int = Field(
        default=1800, description="TTL applied when a set omits one (<= 0 never expires)"
    )

    # Persistence
    DATA_FILE: Path = Field(
        default=Path("./data/snapkv.json"), description="Default save/load document"
    )
    JSON_INDENT: int = Field(default=4, ge=0, description="Indent used when saving")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def create_directories(self) -> None:
        """Create necessary directories."""
        self.DATA_FILE.parent.mkdir(parents=True, exist_ok=True)
        self.LOG_DIR.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()

    def __repr__(self) -> str:
        """String representation of settings."""
        return f"Settings(data_file={self.DATA_FILE}, default_ttl={self.DEFAULT_TTL_SECONDS}, debug={self.DEBUG})"
