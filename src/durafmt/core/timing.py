"""Epoch conversions and fixed-pattern duration formats.

This module provides:
- Epoch millisecond conversions to dates and zone-aware datetimes
- Fixed-width duration formats (HH:mm, HH:mm:ss, HH:mm:ss.SSS, 1h 02min 03s)
- HH:mm parsing back into a timedelta
- Locale-short date and time formatting

Usage:
    from durafmt.core.timing import format_duration_hhmm, parse_duration_hhmm

    duration = parse_duration_hhmm("05:30")
    format_duration_hhmm(duration)  # "05:30"

Duration arguments accept int milliseconds or a timedelta. Zone arguments
accept a tzinfo or an IANA zone name.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from durafmt import i18n
from durafmt.core.config import get_config
from durafmt.core.exceptions import InvalidFormatError, NegativeDurationError, NumberFormatError
from durafmt.core.types import DurationLike, PeriodLike, to_days, to_millis
from durafmt.core.words import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from durafmt.i18n import DateTimePatterns

# Pattern to format a duration as HH:mm
PATTERN_HH_MM = "HH:mm"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SECONDS_PER_HOUR = 60 * 60
_SECONDS_PER_MINUTE = 60
_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MICROSECOND = 1_000

# Whole number: optional sign, ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


# -----------------------------------------------------------------------------
# Epoch conversions
# -----------------------------------------------------------------------------


def _resolve_zone(zone: tzinfo | str | None) -> tzinfo | None:
    """Turn a zone argument into a tzinfo, None meaning the system zone."""
    if zone is None:
        configured = get_config().timezone
        return ZoneInfo(configured) if configured else None
    if isinstance(zone, str):
        return ZoneInfo(zone)
    return zone


def _instant(millis: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=millis)


def to_zoned_datetime(millis: int, zone: tzinfo | str | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime in a zone.

    Args:
        millis: Milliseconds since the epoch.
        zone: Target zone. None uses the configured default timezone, else
            the system local zone.

    Returns:
        Timezone-aware datetime.

    """
    resolved = _resolve_zone(zone)
    if resolved is None:
        return _instant(millis).astimezone()
    return _instant(millis).astimezone(resolved)


def to_local_date(millis: int, zone: tzinfo | str) -> date:
    """Convert epoch milliseconds to the calendar date in a zone."""
    return to_zoned_datetime(millis, zone).date()


def to_offset_datetime(millis: int, zone: tzinfo | str) -> datetime:
    """Convert epoch milliseconds to a datetime with a fixed UTC offset.

    The offset is the one the zone has at that instant; the result no longer
    follows DST rules.
    """
    zoned = to_zoned_datetime(millis, zone)
    return zoned.replace(tzinfo=timezone(zoned.utcoffset() or timedelta(0)))


def to_nanos(value: datetime) -> int:
    """Return nanoseconds since the epoch for an aware datetime.

    Raises:
        ValueError: If the datetime is naive.

    """
    if value.tzinfo is None:
        raise ValueError("to_nanos requires a timezone-aware datetime")
    delta = value - _EPOCH
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * _NANOS_PER_SECOND + delta.microseconds * _NANOS_PER_MICROSECOND


# -----------------------------------------------------------------------------
# Fixed-pattern duration formats
# -----------------------------------------------------------------------------


def _non_negative_millis(duration: DurationLike) -> int:
    millis = to_millis(duration)
    if millis < 0:
        raise NegativeDurationError(millis)
    return millis


def format_duration_words_with_seconds(duration: DurationLike) -> str:
    """Format a duration as hours, minutes and seconds with unit suffixes.

    Units start at the most significant non-zero one among hours and
    minutes. Once a larger unit is shown, smaller ones use two digits.

    Examples:
        >>> format_duration_words_with_seconds(5_000)
        '5s'
        >>> format_duration_words_with_seconds(65_000)
        '1min 05s'
        >>> format_duration_words_with_seconds(3_723_000)
        '1h 02min 03s'

    """
    millis = to_millis(duration)
    # skip milliseconds, truncating toward zero
    seconds = abs(millis) // MS_PER_SECOND
    if millis < 0:
        seconds = -seconds
    parts: list[str] = []

    if seconds >= _SECONDS_PER_HOUR:
        hours, seconds = divmod(seconds, _SECONDS_PER_HOUR)
        parts.append(f"{hours}h")

    if seconds >= _SECONDS_PER_MINUTE or parts:
        minutes, seconds = divmod(seconds, _SECONDS_PER_MINUTE)
        parts.append(f"{minutes:02d}min" if parts else f"{minutes}min")

    parts.append(f"{seconds:02d}s" if parts else f"{seconds}s")
    return " ".join(parts)


def format_duration_hhmm(duration: DurationLike) -> str:
    """Format a duration as HH:mm with total (uncapped) hours.

    Raises:
        NegativeDurationError: If the duration is negative.

    """
    millis = _non_negative_millis(duration)
    hours, rest = divmod(millis, MS_PER_HOUR)
    minutes = rest // MS_PER_MINUTE
    return f"{hours:02d}:{minutes:02d}"


def format_hms(duration: DurationLike) -> str:
    """Format a duration as HH:mm:ss with total (uncapped) hours.

    Raises:
        NegativeDurationError: If the duration is negative.

    """
    millis = _non_negative_millis(duration)
    hours, rest = divmod(millis, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds = rest // MS_PER_SECOND
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_duration_hhmmssmmm(duration: DurationLike) -> str:
    """Format a duration as HH:mm:ss.SSS.

    Raises:
        NegativeDurationError: If the duration is negative.

    """
    millis = _non_negative_millis(duration)
    return f"{format_hms(millis)}.{millis % MS_PER_SECOND:03d}"


def as_weeks_and_days(period: PeriodLike) -> str:
    """Format a day count as ``"<weeks> weeks, <days> days"``.

    Division truncates toward zero, so negative periods give negative
    weeks and days.

    Examples:
        >>> as_weeks_and_days(10)
        '1 weeks, 3 days'
        >>> as_weeks_and_days(-10)
        '-1 weeks, -3 days'

    """
    total = to_days(period)
    sign = -1 if total < 0 else 1
    weeks, days = divmod(abs(total), 7)
    return f"{sign * weeks} weeks, {sign * days} days"


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------


def _parse_long(field: str, text: str) -> int:
    if not _INTEGER_RE.fullmatch(field):
        raise NumberFormatError(f'For input string: "{field}"', text=text, field=field)
    return int(field)


def parse_duration_hhmm(text: str) -> timedelta:
    """Parse ``H:mm`` text into a duration.

    Splits on the first colon. Everything after it is the minutes field, so
    ``"1:2:3"`` fails on ``"2:3"``. Minutes are not range checked:
    ``"1:90"`` is two and a half hours.

    Args:
        text: Text such as ``"05:30"``.

    Returns:
        The duration.

    Raises:
        InvalidFormatError: If the text has no colon.
        NumberFormatError: If either field is not a whole number, or the
            duration is too large to represent.

    """
    hours_text, sep, minutes_text = text.partition(":")
    if not sep:
        raise InvalidFormatError(f"Could not parse <{text}>", text=text)

    hours = _parse_long(hours_text, text)
    minutes = _parse_long(minutes_text, text)
    try:
        result = timedelta(hours=hours)
    except OverflowError as e:
        raise NumberFormatError(
            f'Hours out of range: "{hours_text}"', text=text, field=hours_text
        ) from e
    try:
        return result + timedelta(minutes=minutes)
    except OverflowError as e:
        raise NumberFormatError(
            f'Minutes out of range: "{minutes_text}"', text=text, field=minutes_text
        ) from e


# -----------------------------------------------------------------------------
# Locale formats
# -----------------------------------------------------------------------------


def _patterns(locale: str | None) -> DateTimePatterns:
    return i18n.get_patterns(locale if locale is not None else i18n.current_language())


def _with_millis(template: str) -> str:
    return template.replace("{ss}", "{ss}.{SSS}")


def format_local_date_and_or_time(value: date | datetime, locale: str | None = None) -> str:
    """Format a date in the short style, or date and time if it has a time.

    Args:
        value: A date or datetime.
        locale: Language tag, None for the current language.

    Returns:
        Short date, or short date plus short time for datetimes.

    """
    patterns = _patterns(locale)
    if isinstance(value, datetime):
        template = f"{patterns.short_date}{patterns.date_time_separator}{patterns.short_time}"
        return patterns.render(template, value)
    return patterns.render(patterns.short_date, value)


def format_hhmm(value: time | datetime, locale: str | None = None) -> str:
    """Format a time of day in the short localized style."""
    patterns = _patterns(locale)
    return patterns.render(patterns.short_time, value)


def format_time_millis(value: time | datetime, locale: str | None = None) -> str:
    """Format a time of day in the medium style including milliseconds."""
    patterns = _patterns(locale)
    return patterns.render(_with_millis(patterns.medium_time), value)


def format_date_time_millis(value: datetime, locale: str | None = None) -> str:
    """Format the medium date followed by the medium time with milliseconds."""
    patterns = _patterns(locale)
    template = f"{patterns.medium_date}{patterns.date_time_separator}{patterns.medium_time}"
    return patterns.render(_with_millis(template), value)


def format_date_time_short_millis(value: datetime, locale: str | None = None) -> str:
    """Format the short date followed by the medium time with milliseconds."""
    patterns = _patterns(locale)
    template = f"{patterns.short_date}{patterns.date_time_separator}{patterns.medium_time}"
    return patterns.render(_with_millis(template), value)
