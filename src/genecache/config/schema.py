"""Pydantic models for cache warmer configuration."""

import hashlib
import json
import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

# Log level names accepted on the command line, mapped to stdlib levels.
# "fatal" and "panic" both collapse to CRITICAL.
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}

DEFAULT_BASE_URL = "http://dictybase.org"


class LogConfig(BaseModel):
    """Configuration for the structured event log."""

    level: Literal["debug", "info", "warn", "error", "fatal", "panic"] = Field(
        default="info",
        description="Minimum level of events written to the log",
    )
    format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format, either json or text",
    )
    file: Optional[Path] = Field(
        default=None,
        description="Log file path (truncated on start). Defaults to stderr.",
    )

    @property
    def numeric_level(self) -> int:
        """Stdlib logging level for the configured level name."""
        return LOG_LEVELS[self.level]


class HTTPConfig(BaseModel):
    """Configuration for the outbound HTTP client."""

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per request timeout in seconds",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects before judging the status code",
    )


class WarmerConfig(BaseModel):
    """Main cache warmer configuration."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base url of the dictyBase site whose cache is warmed",
    )
    workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Number of genes warmed concurrently (1 = sequential)",
    )
    http: HTTPConfig = Field(
        default_factory=HTTPConfig,
        description="HTTP client configuration",
    )
    log: LogConfig = Field(
        default_factory=LogConfig,
        description="Logging configuration",
    )

    @field_validator("base_url")
    @classmethod
    def require_base_url(cls, v: str) -> str:
        """Reject an empty base url; its format is otherwise left alone."""
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    def config_hash(self) -> str:
        """
        Compute SHA-256 hash of the configuration.

        Returns a deterministic hash based on all config values,
        useful for telling warming runs apart in the logs.
        """
        config_dict = self.model_dump(mode="python")
        config_json = json.dumps(
            config_dict,
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(config_json.encode()).hexdigest()
