"""Screen text for each wizard stage.

:func:`view` is a pure function of the session.  Styling (colours, panels)
is left to the terminal front end in :mod:`nvim_plugin.cli`.
"""

from __future__ import annotations

from pathlib import Path

from .state import Session, Stage

TITLE = "nvim-plugin: Neovim Plugin Generator"
FOOTER = "Press q to quit"
CURSOR = "█"

SUCCESS_HEADING = "✓ Plugin created successfully!"
ERROR_HEADING = "✗ Error creating plugin:"


def view(session: Session) -> str:
    """Render the full screen: title, stage content, footer."""
    if session.stage is Stage.NAME_INPUT:
        content = view_name_input(session)
    elif session.stage is Stage.DESCRIPTION_INPUT:
        content = view_description_input(session)
    elif session.stage is Stage.CONFIRM_SCREEN:
        content = view_confirm_screen(session)
    else:
        content = view_done(session)
    return f"{TITLE}\n\n{content}\n\n{FOOTER}\n"


def view_name_input(session: Session) -> str:
    return (
        "Plugin Name:\n\n"
        f"{session.name_buffer}{CURSOR}\n\n"
        "Enter the name of your Neovim plugin and press Enter"
    )


def view_description_input(session: Session) -> str:
    return (
        "Plugin Description:\n\n"
        f"{session.description_buffer}{CURSOR}\n\n"
        "Enter a short description and press Enter"
    )


def view_confirm_screen(session: Session) -> str:
    return (
        "Confirm Details:\n\n"
        f"Plugin Name: {session.name_buffer}\n"
        f"Description: {session.description_buffer}\n\n"
        "Is this correct? (y/n)"
    )


def view_done(session: Session) -> str:
    """Success message with the plugin path, or the stored error verbatim."""
    if session.last_error is not None:
        return f"{ERROR_HEADING}\n\n{session.last_error}"
    return (
        f"{SUCCESS_HEADING}\n\n"
        "Your new plugin has been created at:\n"
        f"{_display_path(session)}"
    )


def _display_path(session: Session) -> str:
    root = session.project_root or Path(session.name_buffer)
    if root.is_absolute():
        return str(root)
    return "./" + root.as_posix()
