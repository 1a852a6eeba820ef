"""Pydantic models describing aoc-fetch configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aocfetch import __version__

DEFAULT_BASE_URL = "https://adventofcode.com"
DEFAULT_USER_AGENT = f"aoc-fetch/{__version__}"


class ServiceConfig(BaseModel):
    """Remote puzzle service settings."""

    model_config = ConfigDict(extra="allow")

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    utc_offset_hours: int = Field(default=-5, ge=-12, le=14)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value


class StorageConfig(BaseModel):
    """Where inputs and the session cookie are kept."""

    model_config = ConfigDict(extra="allow")

    output_dir: Path = Path("input")
    cookie_filename: str = Field(default="cookie", min_length=1)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_file: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class AocFetchConfig(BaseModel):
    """Root configuration object for aoc-fetch."""

    model_config = ConfigDict(extra="allow")

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "AocFetchConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "LoggingConfig",
    "ServiceConfig",
    "StorageConfig",
]
