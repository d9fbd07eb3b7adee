"""Exception hierarchy for durafmt.

All errors raised by the package inherit from DurafmtError. Format and parse
errors additionally inherit from ValueError so callers that only know about
the builtin keep working.
"""

from __future__ import annotations


class DurafmtError(Exception):
    """Base exception for all durafmt errors."""

    pass


class ConfigError(DurafmtError):
    """Configuration could not be loaded or validated."""

    pass


class InvalidFormatError(DurafmtError, ValueError):
    """Text does not have the expected shape.

    Attributes:
        text: The offending input.

    """

    def __init__(self, message: str, text: str) -> None:
        """Initialize InvalidFormatError with the offending text.

        Args:
            message: Human-readable error message.
            text: The text that failed to parse.

        """
        super().__init__(message)
        self.text = text


class NumberFormatError(DurafmtError, ValueError):
    """A numeric field could not be parsed as a whole number.

    Attributes:
        text: The complete input that was being parsed.
        field: The substring that is not a number.

    """

    def __init__(self, message: str, text: str, field: str) -> None:
        """Initialize NumberFormatError with context.

        Args:
            message: Human-readable error message.
            text: The complete input.
            field: The non-numeric substring.

        """
        super().__init__(message)
        self.text = text
        self.field = field


class NegativeDurationError(DurafmtError, ValueError):
    """A fixed-pattern formatter received a negative duration.

    Attributes:
        millis: The rejected duration in milliseconds.

    """

    def __init__(self, millis: int) -> None:
        super().__init__(f"Duration must not be negative: {millis} ms")
        self.millis = millis
