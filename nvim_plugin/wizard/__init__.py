"""nvim-plugin wizard -- the interactive name/description/confirm flow.

Quick usage::

    from nvim_plugin.wizard import Session, decode_key, update, view

    session = Session()
    session, command = update(session, decode_key("a"))
    print(view(session))
"""

from nvim_plugin.wizard.keys import KeyEvent, KeyKind, decode_key, decode_keys
from nvim_plugin.wizard.state import Command, Session, Stage, update
from nvim_plugin.wizard.view import view

__all__ = [
    "Command",
    "KeyEvent",
    "KeyKind",
    "Session",
    "Stage",
    "decode_key",
    "decode_keys",
    "update",
    "view",
]
