"""Localization tables for durafmt."""

from durafmt.i18n.duration import (
    DATE_TIME_PATTERNS,
    DEFAULT_LANGUAGE,
    DURATION_I18N,
    ENGLISH,
    ENGLISH_PATTERNS,
    GERMAN,
    GERMAN_PATTERNS,
    DateTimePatterns,
    DurationI18n,
    TimeUnit,
    current_language,
    get,
    get_patterns,
)

__all__ = [
    "DATE_TIME_PATTERNS",
    "DEFAULT_LANGUAGE",
    "DURATION_I18N",
    "ENGLISH",
    "ENGLISH_PATTERNS",
    "GERMAN",
    "GERMAN_PATTERNS",
    "DateTimePatterns",
    "DurationI18n",
    "TimeUnit",
    "current_language",
    "get",
    "get_patterns",
]
