"""Launcher settings, read once from the environment."""

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_RUNTIME_EXECUTABLE,
    DEFINITIONS_DIR_NAME,
    ENV_DEFINITIONS_DIR,
    ENV_IMAGE_PREFIX,
    ENV_IMAGE_QUERY_TIMEOUT,
    ENV_LOG_LEVEL,
    ENV_RUNTIME_EXECUTABLE,
    IMAGE_QUERY_TIMEOUT,
    WINDOWS_RUNTIME_EXECUTABLE,
)


def default_runtime_executable(platform: Optional[str] = None) -> str:
    """Get the platform-specific name of the runtime executable."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS_RUNTIME_EXECUTABLE
    return DEFAULT_RUNTIME_EXECUTABLE


class LauncherSettings(BaseModel):
    """Settings shared by every stage of a launch."""

    image_prefix: Optional[str] = None
    definitions_dir: Path = Field(default_factory=lambda: Path.home() / DEFINITIONS_DIR_NAME)
    runtime_executable: str = Field(default_factory=default_runtime_executable)
    image_query_timeout: float = IMAGE_QUERY_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("image_prefix")
    @classmethod
    def _blank_prefix_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("image_query_timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("image query timeout must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LauncherSettings":
        """Create settings from environment variables.

        Unset or empty variables fall back to the defaults.
        """
        environ = os.environ if environ is None else environ
        values = {}

        if environ.get(ENV_IMAGE_PREFIX):
            values["image_prefix"] = environ[ENV_IMAGE_PREFIX]
        if environ.get(ENV_DEFINITIONS_DIR):
            values["definitions_dir"] = Path(environ[ENV_DEFINITIONS_DIR]).expanduser()
        if environ.get(ENV_RUNTIME_EXECUTABLE):
            values["runtime_executable"] = environ[ENV_RUNTIME_EXECUTABLE]
        if environ.get(ENV_IMAGE_QUERY_TIMEOUT):
            values["image_query_timeout"] = environ[ENV_IMAGE_QUERY_TIMEOUT]
        if environ.get(ENV_LOG_LEVEL):
            values["log_level"] = environ[ENV_LOG_LEVEL]

        return cls(**values)
