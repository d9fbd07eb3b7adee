"""Shared helpers for the durafmt CLI: console, exit codes, logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging through Rich.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log warnings and errors.

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(name)s - %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")


def _warning(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {message}")
