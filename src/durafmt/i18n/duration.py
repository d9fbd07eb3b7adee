"""Localized words and date/time patterns.

Both tables are closed: supported languages are the static entries below and
lookups for anything else fall back to English. Matching uses the language
subtag only, so regions and encodings are ignored.
"""

from __future__ import annotations

import locale
import logging
from datetime import date, datetime, time
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from durafmt.core.config import get_config
from durafmt.core.types import language_of

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class TimeUnit(str, Enum):
    """Units a duration is broken into, most significant first."""

    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"


class DurationI18n(BaseModel):
    """Words used to render a duration in one language.

    Attributes:
        language: Language code this entry is registered under.
        days, day, hours, hour, minutes, minute, seconds, second: Plural and
            singular unit words.

    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(min_length=2)
    days: str = Field(min_length=1)
    day: str = Field(min_length=1)
    hours: str = Field(min_length=1)
    hour: str = Field(min_length=1)
    minutes: str = Field(min_length=1)
    minute: str = Field(min_length=1)
    seconds: str = Field(min_length=1)
    second: str = Field(min_length=1)

    def plural(self, unit: TimeUnit) -> str:
        """Return the plural word for a unit."""
        return {
            TimeUnit.DAYS: self.days,
            TimeUnit.HOURS: self.hours,
            TimeUnit.MINUTES: self.minutes,
            TimeUnit.SECONDS: self.seconds,
        }[unit]

    def singular(self, unit: TimeUnit) -> str:
        """Return the singular word for a unit."""
        return {
            TimeUnit.DAYS: self.day,
            TimeUnit.HOURS: self.hour,
            TimeUnit.MINUTES: self.minute,
            TimeUnit.SECONDS: self.second,
        }[unit]


class DateTimePatterns(BaseModel):
    """Short/medium date and time templates of one language.

    Templates use ``str.format`` fields named after date/time pattern letters:
    ``y`` (full year), ``yy``, ``M``, ``MM``, ``MMM`` (abbreviated month), ``d``,
    ``dd``, ``h`` (12-hour), ``hh``, ``H``, ``HH``, ``mm``, ``ss``, ``SSS``
    (milliseconds) and ``a`` (AM/PM). Single letters are unpadded.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    short_date: str
    medium_date: str
    short_time: str
    medium_time: str
    date_time_separator: str = " "
    month_abbreviations: tuple[str, ...] = Field(
        default=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        min_length=12,
        max_length=12,
    )
    am_pm: tuple[str, str] = ("AM", "PM")

    def render(self, template: str, value: date | time | datetime) -> str:
        """Fill a template with the fields of a date, time or datetime."""
        fields: dict[str, str] = {}
        if isinstance(value, date):
            fields.update(
                y=str(value.year),
                yy=f"{value.year % 100:02d}",
                M=str(value.month),
                MM=f"{value.month:02d}",
                MMM=self.month_abbreviations[value.month - 1],
                d=str(value.day),
                dd=f"{value.day:02d}",
            )
        if isinstance(value, (time, datetime)):
            hour12 = value.hour % 12 or 12
            fields.update(
                h=str(hour12),
                hh=f"{hour12:02d}",
                H=str(value.hour),
                HH=f"{value.hour:02d}",
                mm=f"{value.minute:02d}",
                ss=f"{value.second:02d}",
                SSS=f"{value.microsecond // 1000:03d}",
                a=self.am_pm[value.hour >= 12],
            )
        return template.format_map(fields)


ENGLISH = DurationI18n(
    language="en",
    days="days",
    day="day",
    hours="hours",
    hour="hour",
    minutes="minutes",
    minute="minute",
    seconds="seconds",
    second="second",
)

GERMAN = DurationI18n(
    language="de",
    days="Tage",
    day="Tag",
    hours="Stunden",
    hour="Stunde",
    minutes="Minuten",
    minute="Minute",
    seconds="Sekunden",
    second="Sekunde",
)

ENGLISH_PATTERNS = DateTimePatterns(
    language="en",
    short_date="{M}/{d}/{yy}",
    medium_date="{MMM} {d}, {y}",
    short_time="{h}:{mm} {a}",
    medium_time="{h}:{mm}:{ss} {a}",
    date_time_separator=", ",
)

GERMAN_PATTERNS = DateTimePatterns(
    language="de",
    short_date="{dd}.{MM}.{yy}",
    medium_date="{dd}.{MM}.{y}",
    short_time="{HH}:{mm}",
    medium_time="{HH}:{mm}:{ss}",
    date_time_separator=", ",
    month_abbreviations=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
    ),
)

DURATION_I18N: MappingProxyType[str, DurationI18n] = MappingProxyType(
    {entry.language: entry for entry in (ENGLISH, GERMAN)}
)

DATE_TIME_PATTERNS: MappingProxyType[str, DateTimePatterns] = MappingProxyType(
    {entry.language: entry for entry in (ENGLISH_PATTERNS, GERMAN_PATTERNS)}
)


def current_language() -> str:
    """Return the default language for calls that pass no locale.

    The configured language wins. Otherwise the process locale is read at
    call time, falling back to English when it names no language.
    """
    configured = get_config().language
    if configured:
        return configured
    try:
        process_locale = locale.getlocale()[0]
    except ValueError:
        process_locale = None
    return language_of(process_locale) or DEFAULT_LANGUAGE


def get(language: str | None) -> DurationI18n:
    """Look up the duration words for a language tag.

    Args:
        language: Locale identifier such as ``de`` or ``de_DE``.

    Returns:
        The matching entry, or English if the language is not supported.

    """
    code = language_of(language)
    entry = DURATION_I18N.get(code) if code else None
    if entry is None:
        logger.debug("No duration words for %r, using %s", language, DEFAULT_LANGUAGE)
        return ENGLISH
    return entry


def get_patterns(language: str | None) -> DateTimePatterns:
    """Look up date/time patterns, with the same fallback rules as get()."""
    code = language_of(language)
    patterns = DATE_TIME_PATTERNS.get(code) if code else None
    if patterns is None:
        logger.debug("No date/time patterns for %r, using %s", language, DEFAULT_LANGUAGE)
        return ENGLISH_PATTERNS
    return patterns
