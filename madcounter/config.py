"""
Configuration for MADCounter
============================

Runtime settings for logging, colors and I/O. Values come from environment
variables (optionally through a ``.env`` file). Invalid numeric values are
logged and replaced by their defaults; configuration never aborts a run.

The analysis flag grammar is fixed and is not configurable here.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

TRUTHY_ENV_VALUES = {"1", "true", "yes", "on"}

ENV_PREFIX = "MADCOUNTER_"


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUTHY_ENV_VALUES


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not an integer", ENV_PREFIX, name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s%s=%d: must be >= %d", ENV_PREFIX, name, value, minimum)
        return default
    return value


class Settings(BaseModel):
    """MADCounter settings (environment driven)."""

    LOG_LEVEL: str = Field(default="WARNING", description="Root logging level")
    VERBOSE: bool = Field(default=False, description="Log per-phase timings for each request")
    COLOR_OUTPUT: bool = Field(default=True, description="Colorize error and phase log lines")
    PROGRAM_NAME: str = Field(default="MADCounter", description="Program name shown in usage text")
    READ_CHUNK_SIZE: int = Field(default=64 * 1024, ge=1, description="Block size for the character scan")
    OUTPUT_ENCODING: str = Field(
        default="latin-1",
        description="Encoding for report files (latin-1 keeps byte values 1:1)",
    )

    def __init__(self, **data):
        super().__init__(**data)
        self.load_from_environment()

    def load_from_environment(self) -> None:
        """Load configuration from environment variables."""
        self.LOG_LEVEL = (_env("LOG_LEVEL") or self.LOG_LEVEL).upper()
        self.VERBOSE = _env_bool("VERBOSE", self.VERBOSE)
        self.COLOR_OUTPUT = _env_bool("COLOR", self.COLOR_OUTPUT)
        self.PROGRAM_NAME = _env("PROGRAM_NAME") or self.PROGRAM_NAME
        self.READ_CHUNK_SIZE = _env_int("READ_CHUNK_SIZE", self.READ_CHUNK_SIZE, minimum=1)
        self.OUTPUT_ENCODING = _env("OUTPUT_ENCODING") or self.OUTPUT_ENCODING

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING


# Global configuration instance
config = Settings()
