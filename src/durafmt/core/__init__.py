"""Core module for durafmt.

This module provides:
- Configuration model and singleton access via get_config()
- YAML configuration loading via load_config()
- Custom exception hierarchy with DurafmtError as base
- Duration type helpers

Formatters live in durafmt.core.words and durafmt.core.timing.
"""

from durafmt.core.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    DurafmtConfig,
    get_config,
    load_config,
    set_config,
)
from durafmt.core.exceptions import (
    ConfigError,
    DurafmtError,
    InvalidFormatError,
    NegativeDurationError,
    NumberFormatError,
)
from durafmt.core.types import DurationLike, PeriodLike, language_of, to_days, to_millis

__all__ = [
    # Config
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "DurafmtConfig",
    "get_config",
    "load_config",
    "set_config",
    # Exceptions
    "ConfigError",
    "DurafmtError",
    "InvalidFormatError",
    "NegativeDurationError",
    "NumberFormatError",
    # Types
    "DurationLike",
    "PeriodLike",
    "language_of",
    "to_days",
    "to_millis",
]
