"""Key events consumed by the wizard.

Raw characters read from the terminal are decoded into :class:`KeyEvent`
values.  ``KeyEvent.name`` gives the string the state machine matches on:
``"enter"``, ``"backspace"``, ``"ctrl+c"``, or the typed text itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    RUNES = "runes"
    ENTER = "enter"
    BACKSPACE = "backspace"
    INTERRUPT = "ctrl+c"
    UNKNOWN = "unknown"


QUIT_KEYS = frozenset({"q", "ctrl+c"})
ACCEPT_KEYS = frozenset({"y", "Y"})
DECLINE_KEYS = frozenset({"n", "N"})

_ENTER_CHARS = ("\r", "\n", "\r\n")
_BACKSPACE_CHARS = ("\x7f", "\x08")
_INTERRUPT_CHAR = "\x03"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press (or a pasted run of printable characters)."""

    kind: KeyKind
    text: str = ""

    @property
    def name(self) -> str:
        if self.kind is KeyKind.RUNES:
            return self.text
        if self.kind is KeyKind.UNKNOWN:
            return ""
        return self.kind.value

    @classmethod
    def runes(cls, text: str) -> "KeyEvent":
        return cls(KeyKind.RUNES, text)


ENTER = KeyEvent(KeyKind.ENTER)
BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
INTERRUPT = KeyEvent(KeyKind.INTERRUPT)


def decode_key(raw: str) -> KeyEvent:
    """Translate the raw characters of one key press into a ``KeyEvent``.

    Escape sequences (arrow keys, function keys) and control characters
    other than enter, backspace and ctrl+c decode to ``KeyKind.UNKNOWN``.
    """
    if raw in _ENTER_CHARS:
        return ENTER
    if raw in _BACKSPACE_CHARS:
        return BACKSPACE
    if raw == _INTERRUPT_CHAR:
        return INTERRUPT
    if raw and raw.isprintable():
        return KeyEvent.runes(raw)
    return KeyEvent(KeyKind.UNKNOWN, raw)


# Single characters that must reach the state machine on their own even when
# they arrive in the middle of a chunk of typed text.
_SOLO_CHARS = frozenset(k for k in QUIT_KEYS | ACCEPT_KEYS | DECLINE_KEYS if len(k) == 1)


def _escape_sequence_end(raw: str, start: int) -> int:
    """Index just past the escape sequence that begins at ``raw[start]``."""
    i = start + 1
    if i >= len(raw):
        return i
    if raw[i] == "[":
        # CSI: parameter bytes until a final byte in '@'..'~'
        i += 1
        while i < len(raw) and not ("@" <= raw[i] <= "~"):
            i += 1
        return min(i + 1, len(raw))
    # SS3 (``\x1bO`` + one char) or alt+key
    if raw[i] == "O":
        return min(i + 2, len(raw))
    return i + 1


def decode_keys(raw: str) -> list[KeyEvent]:
    """Split a chunk of raw terminal input into individual key events.

    A terminal read can return several key presses at once (fast typing,
    a held key, a paste).  Runs of printable characters become one RUNES
    event, except that quit, accept and decline characters always get an
    event of their own.  Each enter, backspace and ctrl+c is its own event,
    ``\\r\\n`` counts as one enter, and an escape sequence is one UNKNOWN
    event.
    """
    events: list[KeyEvent] = []
    run_start: int | None = None
    i = 0

    def flush(end: int) -> None:
        nonlocal run_start
        if run_start is not None:
            events.append(KeyEvent.runes(raw[run_start:end]))
            run_start = None

    while i < len(raw):
        char = raw[i]
        if char.isprintable() and char not in _SOLO_CHARS:
            if run_start is None:
                run_start = i
            i += 1
            continue

        flush(i)
        if char == "\x1b":
            end = _escape_sequence_end(raw, i)
            events.append(KeyEvent(KeyKind.UNKNOWN, raw[i:end]))
            i = end
        elif raw.startswith("\r\n", i):
            events.append(ENTER)
            i += 2
        else:
            events.append(decode_key(char))
            i += 1
    flush(i)
    return events
