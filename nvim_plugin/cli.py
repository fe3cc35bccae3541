"""Terminal front end for the nvim-plugin wizard.

Reads one key at a time, feeds it through the wizard state machine and
redraws the screen after every event.

Usage::

    nvim-plugin
    python -m nvim_plugin

The program takes no arguments.  Settings come from the environment, see
:meth:`nvim_plugin.config.Config.from_env`.
"""

from __future__ import annotations

import functools
import logging
import sys
from typing import Callable

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from nvim_plugin.config import Config
from nvim_plugin.scaffolder import generate_plugin
from nvim_plugin.utils import console, print_error, print_success, setup_logging
from nvim_plugin.wizard import Command, Session, Stage, decode_keys, update, view
from nvim_plugin.wizard.state import Generate

logger = logging.getLogger(__name__)

ReadKey = Callable[[], str]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def border_style(session: Session) -> str:
    """Panel colour for the current stage."""
    if session.stage is Stage.DONE:
        return "red" if session.last_error is not None else "green"
    return "#7D56F4"


def render_screen(session: Session, out: Console = console) -> None:
    """Clear the terminal and draw the current wizard screen."""
    out.clear()
    # Text() so error messages and user input are never parsed as markup
    out.print(Panel(Text(view(session)), border_style=border_style(session), expand=False))


# ---------------------------------------------------------------------------
# Event loop
# ---------------------------------------------------------------------------


def apply_keys(
    session: Session, raw: str, generate: Generate = generate_plugin
) -> tuple[Session, Command]:
    """Feed every key in one terminal read through the state machine.

    Keys after a quit are discarded.
    """
    command = Command.NONE
    for event in decode_keys(raw):
        session, command = update(session, event, generate)
        if command is Command.QUIT:
            break
    return session, command


def run(
    generate: Generate = generate_plugin,
    read_key: ReadKey = click.getchar,
    out: Console = console,
) -> Session:
    """Drive the wizard until the user quits.

    Each read is fully processed, including a generation run on the confirm
    screen, before the next one is read.

    Returns:
        The final session.
    """
    session = Session()
    while True:
        render_screen(session, out)
        try:
            raw = read_key()
        except (KeyboardInterrupt, EOFError):
            logger.debug("Input closed, leaving wizard")
            break
        session, command = apply_keys(session, raw, generate)
        if command is Command.QUIT:
            break
    logger.debug("Wizard finished in stage %s", session.stage.value)
    return session


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``nvim-plugin`` / ``python -m nvim_plugin``."""
    try:
        config = Config.from_env()
        setup_logging(config.numeric_log_level, config.log_file)
    except (ValidationError, OSError) as exc:
        print_error(f"Error: could not start nvim-plugin: {exc}")
        sys.exit(1)

    if not sys.stdin.isatty():
        print_error("Error: nvim-plugin must be run in an interactive terminal")
        sys.exit(1)

    logger.info("Starting wizard (output directory: %s)", config.output_dir)
    session = run(generate=functools.partial(generate_plugin, output_dir=config.output_dir))
    if session.project_root is not None:
        logger.info("Created plugin at %s", session.project_root)
        print_success(f"Created {session.project_root}")


if __name__ == "__main__":
    main()
