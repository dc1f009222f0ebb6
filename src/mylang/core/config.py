"""
Configuration models for mylang.

Configuration is loaded from the [mylang] table of mylang.toml. The
MYLANG_LOG_LEVEL environment variable overrides the file's log level.

Example mylang.toml:

    [mylang]
    error_exit_status = 1
    log_level = "INFO"

    [mylang.output]
    show_tokens = false
    indent_width = 2
"""

from __future__ import annotations

import logging
import os
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from mylang.core.errors import ConfigError

DEFAULT_CONFIG_FILE = "mylang.toml"

# Environment variable name
LOG_LEVEL_ENV_VAR = "MYLANG_LOG_LEVEL"


class LogLevel(StrEnum):
    """Logging levels accepted in configuration and on the command line."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class OutputConfig(BaseModel):
    """Which pipeline sections the CLI prints, and how."""

    show_tokens: bool = True
    show_tree: bool = True
    indent_width: int = Field(default=4, ge=1, le=16)


class MyLangConfig(BaseModel):
    """Complete mylang configuration."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    error_exit_status: int = Field(default=1, ge=0, le=255)
    log_level: LogLevel = LogLevel.WARNING

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def get_env_log_level() -> LogLevel | None:
    """Log level from MYLANG_LOG_LEVEL, or None if unset.

    Unknown values fall back to WARNING.
    """
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value not in LogLevel.__members__:
        return LogLevel.WARNING
    return LogLevel(value)


def load_config(toml_path: Path | None = None) -> MyLangConfig:
    """
    Load configuration from a TOML file.

    Args:
        toml_path: Path to the file; defaults to mylang.toml in the
            working directory. A missing file yields the defaults.

    Returns:
        MyLangConfig with values from file, environment or defaults

    Raises:
        ConfigError: If the file is not valid TOML or fails validation.
    """
    path = toml_path if toml_path is not None else Path.cwd() / DEFAULT_CONFIG_FILE

    data: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = dict(data.get("mylang", {}))
    env_level = get_env_log_level()
    if env_level is not None:
        section["log_level"] = env_level

    try:
        return MyLangConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
