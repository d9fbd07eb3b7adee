"""Core type definitions for durafmt.

Durations are accepted either as a plain count of milliseconds or as a
``datetime.timedelta``. Every formatter normalizes through ``to_millis``.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import TypeAlias

# Elapsed time: int milliseconds or a timedelta
DurationLike: TypeAlias = int | timedelta

# Day count (Period) for week/day formatting
PeriodLike: TypeAlias = int | timedelta

_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_millis(duration: DurationLike) -> int:
    """Normalize a duration to whole milliseconds.

    Args:
        duration: Milliseconds or timedelta.

    Returns:
        Duration in milliseconds. Sub-millisecond parts of a timedelta
        are floored.

    Examples:
        >>> to_millis(1500)
        1500
        >>> to_millis(timedelta(minutes=1))
        60000

    """
    if isinstance(duration, timedelta):
        return duration // _ONE_MILLISECOND
    return int(duration)


def to_days(period: PeriodLike) -> int:
    """Return the day count of a period (timedelta.days or the int itself)."""
    if isinstance(period, timedelta):
        return period.days
    return int(period)


# Locale names that carry no language (POSIX defaults)
_NEUTRAL_LOCALES = frozenset({"c", "posix"})


def language_of(tag: str | None) -> str | None:
    """Extract the lower-cased language subtag of a locale identifier.

    Region, encoding and modifier parts are ignored, so ``de``, ``de_DE``,
    ``de-CH`` and ``de_DE.UTF-8`` all yield ``"de"``.

    Args:
        tag: Locale identifier or None.

    Returns:
        Language code, or None if the tag is empty or a POSIX default.

    Examples:
        >>> language_of("de_DE.UTF-8")
        'de'
        >>> language_of("C") is None
        True

    """
    if not tag:
        return None
    language = re.split(r"[-_.@]", tag.strip(), maxsplit=1)[0].lower()
    if not language or language in _NEUTRAL_LOCALES:
        return None
    return language
