"""Shared pytest fixtures for the nvim-plugin test suite.

Provides reusable fixtures for:
- Temporary output directories
- A fixed generation date
- Driving the wizard with a sequence of key names
"""

from __future__ import annotations

import functools
from datetime import date
from pathlib import Path
from typing import Callable

import pytest

from nvim_plugin.scaffolder import generate_plugin
from nvim_plugin.wizard import Command, KeyEvent, Session, update
from nvim_plugin.wizard.keys import BACKSPACE, ENTER, INTERRUPT


# ---------------------------------------------------------------------------
# Paths & dates
# ---------------------------------------------------------------------------

FIXED_DATE = date(2024, 3, 9)


@pytest.fixture
def fixed_date() -> date:
    return FIXED_DATE


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory the generator writes plugins into."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def generate(output_dir: Path) -> Callable[[str, str], Path]:
    """``generate_plugin`` bound to the temporary output dir and fixed date."""
    return functools.partial(generate_plugin, output_dir=output_dir, today=FIXED_DATE)


# ---------------------------------------------------------------------------
# Wizard driving
# ---------------------------------------------------------------------------


def key(name: str) -> KeyEvent:
    """Build a KeyEvent from a key name such as ``"enter"`` or ``"a"``."""
    if name == "enter":
        return ENTER
    if name == "backspace":
        return BACKSPACE
    if name == "ctrl+c":
        return INTERRUPT
    return KeyEvent.runes(name)


def press_keys(
    session: Session,
    *keys: str,
    generate: Callable[[str, str], Path] | None = None,
) -> tuple[Session, Command]:
    """Feed *keys* through ``update`` and return the final session/command.

    Stops early if a key produces ``Command.QUIT``.
    """
    command = Command.NONE
    kwargs = {"generate": generate} if generate is not None else {}
    for name in keys:
        session, command = update(session, key(name), **kwargs)
        if command is Command.QUIT:
            break
    return session, command


@pytest.fixture
def no_generate() -> Callable[[str, str], Path]:
    """A generate callable that fails the test if it is ever invoked."""

    def _fail(name: str, description: str) -> Path:
        pytest.fail(f"generate() should not have been called ({name!r}, {description!r})")

    return _fail


@pytest.fixture
def press() -> Callable[..., tuple[Session, Command]]:
    """The :func:`press_keys` helper, for use inside test classes."""
    return press_keys


@pytest.fixture
def make_key() -> Callable[[str], KeyEvent]:
    return key
