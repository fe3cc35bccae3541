"""Wizard state machine.

The wizard walks through four stages::

    NAME_INPUT -> DESCRIPTION_INPUT -> CONFIRM_SCREEN -> DONE
         ^                                   |
         +------------- decline -------------+

:func:`update` is the whole transition table.  It never renders anything;
see :mod:`nvim_plugin.wizard.view` for the screen text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Callable

from nvim_plugin.scaffolder import GenerationError, ScaffoldRequest, generate_plugin

from .keys import ACCEPT_KEYS, DECLINE_KEYS, QUIT_KEYS, KeyEvent, KeyKind

logger = logging.getLogger(__name__)

Generate = Callable[[str, str], Path]


class Stage(Enum):
    NAME_INPUT = "name_input"
    DESCRIPTION_INPUT = "description_input"
    CONFIRM_SCREEN = "confirm_screen"
    DONE = "done"


class Command(Enum):
    """What the event loop should do after an update."""

    NONE = "none"
    QUIT = "quit"


@dataclass(frozen=True)
class Session:
    """Everything the wizard knows about the current run."""

    stage: Stage = Stage.NAME_INPUT
    name_buffer: str = ""
    description_buffer: str = ""
    last_error: GenerationError | None = None
    project_root: Path | None = None

    def to_request(self) -> ScaffoldRequest:
        return ScaffoldRequest(name=self.name_buffer, description=self.description_buffer)


def update(
    session: Session,
    event: KeyEvent,
    generate: Generate = generate_plugin,
) -> tuple[Session, Command]:
    """Apply one key event and return the next session.

    Quit keys are handled before anything stage-specific.  Events a stage
    does not recognise leave the session unchanged.

    Args:
        session: Current wizard state.
        event: The key that was pressed.
        generate: Called with ``(name, description)`` when the user accepts
            on the confirm screen; returns the created plugin root.
    """
    if event.name in QUIT_KEYS:
        return session, Command.QUIT

    if session.stage is Stage.NAME_INPUT:
        return _update_name_input(session, event), Command.NONE
    if session.stage is Stage.DESCRIPTION_INPUT:
        return _update_description_input(session, event), Command.NONE
    if session.stage is Stage.CONFIRM_SCREEN:
        return _update_confirm_screen(session, event, generate), Command.NONE
    return session, Command.NONE


# ---------------------------------------------------------------------------
# Per-stage handlers
# ---------------------------------------------------------------------------


def _update_name_input(session: Session, event: KeyEvent) -> Session:
    if event.kind is KeyKind.ENTER:
        if session.name_buffer:
            return replace(session, stage=Stage.DESCRIPTION_INPUT)
        return session
    if event.kind is KeyKind.BACKSPACE:
        return replace(session, name_buffer=session.name_buffer[:-1])
    if event.kind is KeyKind.RUNES:
        return replace(session, name_buffer=session.name_buffer + event.text)
    return session


def _update_description_input(session: Session, event: KeyEvent) -> Session:
    if event.kind is KeyKind.ENTER:
        return replace(session, stage=Stage.CONFIRM_SCREEN)
    if event.kind is KeyKind.BACKSPACE:
        return replace(session, description_buffer=session.description_buffer[:-1])
    if event.kind is KeyKind.RUNES:
        return replace(session, description_buffer=session.description_buffer + event.text)
    return session


def _update_confirm_screen(session: Session, event: KeyEvent, generate: Generate) -> Session:
    if event.name in ACCEPT_KEYS:
        request = session.to_request()
        try:
            root = generate(request.name, request.description)
        except GenerationError as exc:
            logger.info("Plugin generation failed: %s", exc)
            return replace(session, stage=Stage.DONE, last_error=exc)
        return replace(session, stage=Stage.DONE, last_error=None, project_root=root)
    if event.name in DECLINE_KEYS:
        return Session()
    return session
