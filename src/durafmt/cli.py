"""Command line interface for durafmt.

Examples:
    durafmt words 93784000            # 1 day 2 hours 3 minutes 4 seconds
    durafmt words 93784000 --lang de  # 1 Tag 2 Stunden 3 Minuten 4 Sekunden
    durafmt clock 3723000             # 1h 02min 03s
    durafmt parse 05:30               # 05:30 (19800000 ms)
    durafmt weeks 10                  # 1 weeks, 3 days

"""

import logging
from pathlib import Path

import typer

from durafmt import __version__
from durafmt.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _setup_logging,
    _warning,
    console,
)
from durafmt.core.config import load_config
from durafmt.core.exceptions import ConfigError, DurafmtError
from durafmt.core.timing import (
    as_weeks_and_days,
    format_duration_hhmm,
    format_duration_hhmmssmmm,
    format_duration_words_with_seconds,
    format_hms,
    format_local_date_and_or_time,
    parse_duration_hhmm,
    to_zoned_datetime,
)
from durafmt.core.types import to_millis
from durafmt.core.words import format_duration_words

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="durafmt",
    help="Format epoch timestamps and durations",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"durafmt {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config.yaml (default: $DURAFMT_CONFIG or ~/.config/durafmt/config.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    if verbose and quiet:
        _warning("--verbose and --quiet given, using --verbose")
    _setup_logging(verbose=verbose, quiet=quiet and not verbose)
    try:
        load_config(config)
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from e


def _run(func, *args):
    """Call a formatter, mapping library errors to a CLI exit."""
    try:
        return func(*args)
    except DurafmtError as e:
        logger.debug("%s failed for %r", func.__name__, args, exc_info=True)
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e


@app.command("words", context_settings={"ignore_unknown_options": True})
def words(
    millis: int = typer.Argument(..., help="Duration in milliseconds"),
    lang: str | None = typer.Option(None, "--lang", "-l", help="Language, e.g. en or de_DE"),
) -> None:
    """Format a duration as words, e.g. '2 days 3 hours'."""
    console.print(format_duration_words(millis, lang))


@app.command("clock", context_settings={"ignore_unknown_options": True})
def clock(millis: int = typer.Argument(..., help="Duration in milliseconds")) -> None:
    """Format a duration as '1h 02min 03s'."""
    console.print(format_duration_words_with_seconds(millis))


@app.command("hhmm")
def hhmm(millis: int = typer.Argument(..., help="Duration in milliseconds")) -> None:
    """Format a duration as HH:mm."""
    console.print(_run(format_duration_hhmm, millis))


@app.command("hms")
def hms(
    millis: int = typer.Argument(..., help="Duration in milliseconds"),
    with_millis: bool = typer.Option(False, "--millis", "-m", help="Append milliseconds"),
) -> None:
    """Format a duration as HH:mm:ss (or HH:mm:ss.SSS)."""
    formatter = format_duration_hhmmssmmm if with_millis else format_hms
    console.print(_run(formatter, millis))


@app.command("parse")
def parse(text: str = typer.Argument(..., help="Duration as H:mm")) -> None:
    """Parse H:mm and print it normalized with its length in milliseconds."""
    duration = _run(parse_duration_hhmm, text)
    console.print(f"{format_duration_hhmm(duration)} ({to_millis(duration)} ms)")


@app.command("weeks")
def weeks(days: int = typer.Argument(..., help="Number of days")) -> None:
    """Format a day count as weeks and days."""
    console.print(as_weeks_and_days(days))


@app.command("date")
def date_(
    millis: int = typer.Argument(..., help="Epoch milliseconds"),
    zone: str | None = typer.Option(None, "--zone", "-z", help="IANA timezone"),
    lang: str | None = typer.Option(None, "--lang", "-l", help="Language, e.g. en or de_DE"),
    date_only: bool = typer.Option(False, "--date-only", "-d", help="Omit the time of day"),
) -> None:
    """Format epoch milliseconds as a short localized date (and time)."""
    try:
        value = to_zoned_datetime(millis, zone)
    except (KeyError, ValueError) as e:
        _error(f"Unknown timezone: {zone}")
        raise typer.Exit(code=EXIT_ERROR) from e
    console.print(format_local_date_and_or_time(value.date() if date_only else value, lang))


if __name__ == "__main__":
    app()
