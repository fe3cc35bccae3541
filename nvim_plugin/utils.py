"""Shared utility functions for nvim-plugin.

Provides the Rich console used for all terminal output, success and error
message helpers, and logging setup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()

LOGGER_NAME = "nvim_plugin"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Configure the ``nvim_plugin`` logger.

    Logs go to *log_file* when one is given, otherwise to stderr through a
    ``RichHandler`` so they do not interleave with the wizard screen on
    stdout.  Calling this again replaces the previous handlers.

    Args:
        level: Logging level name or number.
        log_file: Optional file to append log records to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    return logger


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")
