"""Configuration for durafmt.

This module provides the Pydantic configuration model and YAML loading with
singleton access. Configuration only supplies defaults: a caller passing an
explicit locale or zone always wins.

Usage:
    from durafmt.core.config import get_config, load_config

    load_config()  # $DURAFMT_CONFIG or ~/.config/durafmt/config.yaml
    config = get_config()
    if config.language is not None:
        ...

Example config.yaml:
    language: de
    timezone: Europe/Berlin
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from durafmt.core.exceptions import ConfigError
from durafmt.core.types import language_of

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DURAFMT_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "durafmt" / "config.yaml"
MAX_CONFIG_SIZE = 64 * 1024


class DurafmtConfig(BaseModel):
    """Process-wide formatting defaults.

    Attributes:
        language: Default language for localized output. None follows the
            process locale.
        timezone: Default IANA zone for epoch conversions. None uses the
            system local zone.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: str | None = Field(
        default=None,
        description="Default language code, e.g. 'en' or 'de_DE'",
    )
    timezone: str | None = Field(
        default=None,
        description="Default IANA timezone, e.g. 'Europe/Berlin'",
    )

    @field_validator("language", mode="after")
    @classmethod
    def normalize_language(cls, v: str | None) -> str | None:
        """Reduce the configured locale to its language subtag."""
        return language_of(v)

    @field_validator("timezone", mode="after")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Ensure the zone exists in the zoneinfo database."""
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


_config: DurafmtConfig | None = None


def get_config() -> DurafmtConfig:
    """Return the active configuration, defaults if none was loaded."""
    global _config
    if _config is None:
        _config = DurafmtConfig()
    return _config


def set_config(config: DurafmtConfig) -> None:
    """Replace the active configuration."""
    global _config
    _config = config


def _reset_config() -> None:
    """Clear the configuration singleton (testing only)."""
    global _config
    _config = None


def _read_yaml(path: Path) -> dict[str, Any]:
    if path.stat().st_size > MAX_CONFIG_SIZE:
        raise ConfigError(f"Config file too large: {path} (max {MAX_CONFIG_SIZE} bytes)")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: str | Path | None = None) -> DurafmtConfig:
    """Load configuration from YAML and install it as the active config.

    Resolution order: explicit ``path``, ``$DURAFMT_CONFIG``, then
    ``~/.config/durafmt/config.yaml``. Only the implicit default location
    may be absent.

    Args:
        path: Optional explicit config file.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If an explicit file is missing, or the file cannot be
            parsed or validated.

    """
    explicit = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_PATH

    if not config_path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        config = DurafmtConfig()
        set_config(config)
        return config

    data = _read_yaml(config_path)
    try:
        config = DurafmtConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    logger.debug("Loaded config from %s: %s", config_path, config.model_dump())
    set_config(config)
    return config
