"""Duration-to-words formatting.

Renders an elapsed duration as localized words, e.g. ``"2 days 3 hours"``.

The duration is split into days, hours, minutes and seconds and rendered
with every unit present. Zero units are then stripped from both ends:

- the front pass walks days -> hours -> minutes -> seconds,
- the back pass walks seconds -> minutes -> hours -> days,

and each step of a pass only runs if the previous step removed its unit.
Zeros between non-zero units stay (``"3 days 0 hours 5 minutes"``). Neither
pass removes the last remaining unit, so a zero duration reads
``"0 seconds"``. Units with a count of exactly one use the singular word.

Example:
    >>> format_duration_words(93_784_000, "en")
    '1 day 2 hours 3 minutes 4 seconds'
    >>> format_duration_words(3 * MS_PER_DAY + 5 * MS_PER_MINUTE, "en")
    '3 days 0 hours 5 minutes'
    >>> format_duration_words(-5, "en")
    '-5 ms'

"""

from __future__ import annotations

from typing import NamedTuple

from durafmt import i18n
from durafmt.core.types import DurationLike, to_millis
from durafmt.i18n import DurationI18n, TimeUnit

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60_000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
_SECONDS_PER_MINUTE = 60
_MINUTES_PER_HOUR = 60
_HOURS_PER_DAY = 24


class DurationParts(NamedTuple):
    """A duration split into whole units."""

    days: int
    hours: int
    minutes: int
    seconds: int


class Segment(NamedTuple):
    """One rendered ``<count> <word>`` pair."""

    count: int
    unit: TimeUnit
    word: str

    def __str__(self) -> str:
        return f"{self.count} {self.word}"


def decompose(millis: int) -> DurationParts:
    """Split non-negative milliseconds into days/hours/minutes/seconds.

    Sub-second remainders are dropped. A day is always 24 hours.

    Examples:
        >>> decompose(93_784_567)
        DurationParts(days=1, hours=2, minutes=3, seconds=4)

    """
    total_seconds = millis // MS_PER_SECOND
    total_minutes, seconds = divmod(total_seconds, _SECONDS_PER_MINUTE)
    total_hours, minutes = divmod(total_minutes, _MINUTES_PER_HOUR)
    days, hours = divmod(total_hours, _HOURS_PER_DAY)
    return DurationParts(days, hours, minutes, seconds)


def render_segments(parts: DurationParts, words: DurationI18n) -> list[Segment]:
    """Render every unit with its plural word, most significant first."""
    return [
        Segment(parts.days, TimeUnit.DAYS, words.days),
        Segment(parts.hours, TimeUnit.HOURS, words.hours),
        Segment(parts.minutes, TimeUnit.MINUTES, words.minutes),
        Segment(parts.seconds, TimeUnit.SECONDS, words.seconds),
    ]


def _strip_zero(segments: list[Segment], unit: TimeUnit, index: int) -> bool:
    """Remove the segment at ``index`` if it is a zero of ``unit``.

    Returns:
        True if a segment was removed.

    """
    if len(segments) <= 1:
        return False
    segment = segments[index]
    if segment.unit is not unit or segment.count != 0:
        return False
    del segments[index]
    return True


_FRONT_ORDER = (TimeUnit.DAYS, TimeUnit.HOURS, TimeUnit.MINUTES, TimeUnit.SECONDS)
_BACK_ORDER = tuple(reversed(_FRONT_ORDER))


def strip_leading_zeros(segments: list[Segment]) -> list[Segment]:
    """Strip the contiguous run of zero units from the most significant end."""
    result = list(segments)
    for unit in _FRONT_ORDER:
        if not _strip_zero(result, unit, 0):
            break
    return result


def strip_trailing_zeros(segments: list[Segment]) -> list[Segment]:
    """Strip the contiguous run of zero units from the least significant end."""
    result = list(segments)
    for unit in _BACK_ORDER:
        if not _strip_zero(result, unit, -1):
            break
    return result


def apply_singulars(segments: list[Segment], words: DurationI18n) -> list[Segment]:
    """Swap in the singular word for every unit counted exactly once."""
    return [
        segment._replace(word=words.singular(segment.unit)) if segment.count == 1 else segment
        for segment in segments
    ]


def join_segments(segments: list[Segment]) -> str:
    return " ".join(str(segment) for segment in segments)


def _resolve_words(locale: str | DurationI18n | None) -> DurationI18n:
    if isinstance(locale, DurationI18n):
        return locale
    if locale is None:
        locale = i18n.current_language()
    return i18n.get(locale)


def format_duration_words(
    duration: DurationLike,
    locale: str | DurationI18n | None = None,
) -> str:
    """Format a duration as localized words.

    Args:
        duration: Milliseconds or timedelta.
        locale: Language tag, a DurationI18n entry, or None for the current
            language (config, then process locale).

    Returns:
        Words such as ``"2 days 3 hours"``. Negative durations are returned
        unchanged as ``"<millis> ms"``.

    """
    millis = to_millis(duration)
    if millis < 0:
        return f"{millis} ms"

    words = _resolve_words(locale)
    segments = render_segments(decompose(millis), words)
    segments = strip_leading_zeros(segments)
    segments = strip_trailing_zeros(segments)
    segments = apply_singulars(segments, words)
    return join_segments(segments)
