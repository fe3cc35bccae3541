"""Tests for the wizard state machine (nvim_plugin.wizard.state).

Covers:
- Initial session
- Name and description editing, including backspace on empty buffers
- The non-empty name gate
- Accept / decline on the confirm screen
- Global quit handling from every stage
- Unrecognised events are no-ops
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nvim_plugin.scaffolder import DirectoryCreationError, ScaffoldRequest
from nvim_plugin.wizard import Command, KeyEvent, KeyKind, Session, Stage, update

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------


class TestNewSession:
    def test_defaults(self):
        session = Session()
        assert session.stage is Stage.NAME_INPUT
        assert session.name_buffer == ""
        assert session.description_buffer == ""
        assert session.last_error is None
        assert session.project_root is None

    def test_to_request(self):
        session = Session(name_buffer="my-plugin", description_buffer="A test plugin")
        assert session.to_request() == ScaffoldRequest(
            name="my-plugin", description="A test plugin"
        )


# ---------------------------------------------------------------------------
# Name input
# ---------------------------------------------------------------------------


class TestNameInput:
    def test_typing_appends(self, press, no_generate):
        session, command = press(Session(), "t", "e", "s", "t", generate=no_generate)
        assert session.name_buffer == "test"
        assert session.stage is Stage.NAME_INPUT
        assert command is Command.NONE

    def test_backspace_removes_last_character(self, press, no_generate):
        session, _ = press(Session(), "t", "e", "s", "t", "backspace", generate=no_generate)
        assert session.name_buffer == "tes"

    def test_backspace_on_empty_is_noop(self, press, no_generate):
        session, _ = press(Session(), "backspace", generate=no_generate)
        assert session == Session()

    def test_backspace_removes_whole_character_not_byte(self, press, no_generate):
        session, _ = press(Session(), "n", "é", "backspace", generate=no_generate)
        assert session.name_buffer == "n"

    def test_type_then_erase_round_trip(self, press, no_generate):
        text = "my-plugin"
        keys = list(text) + ["backspace"] * len(text)
        session, _ = press(Session(), *keys, generate=no_generate)
        assert session.name_buffer == ""
        assert session.stage is Stage.NAME_INPUT

    def test_enter_with_name_advances(self, press, no_generate):
        session, _ = press(Session(), "t", "enter", generate=no_generate)
        assert session.stage is Stage.DESCRIPTION_INPUT
        assert session.name_buffer == "t"

    def test_enter_with_empty_name_is_noop(self, press, no_generate):
        session, command = press(Session(), "enter", generate=no_generate)
        assert session == Session()
        assert command is Command.NONE

    def test_enter_after_erasing_name_is_noop(self, press, no_generate):
        session, _ = press(Session(), "a", "backspace", "enter", generate=no_generate)
        assert session.stage is Stage.NAME_INPUT

    def test_pasted_runes_append_together(self):
        session, _ = update(Session(name_buffer="my"), KeyEvent.runes("-plugin"))
        assert session.name_buffer == "my-plugin"

    def test_accept_key_is_plain_text_here(self, press, no_generate):
        session, _ = press(Session(), "y", "n", "Y", generate=no_generate)
        assert session.name_buffer == "ynY"
        assert session.stage is Stage.NAME_INPUT

    def test_update_does_not_mutate_input(self, press, no_generate):
        before = Session()
        press(before, "a", "b", generate=no_generate)
        assert before.name_buffer == ""


# ---------------------------------------------------------------------------
# Description input
# ---------------------------------------------------------------------------


class TestDescriptionInput:
    @pytest.fixture
    def session(self) -> Session:
        return Session(stage=Stage.DESCRIPTION_INPUT, name_buffer="test-plugin")

    def test_typing_appends(self, session, press, no_generate):
        session, _ = press(session, "a", " ", "t", "e", "s", "t", generate=no_generate)
        assert session.description_buffer == "a test"
        assert session.name_buffer == "test-plugin"

    def test_backspace(self, session, press, no_generate):
        session, _ = press(session, "a", "b", "backspace", generate=no_generate)
        assert session.description_buffer == "a"

    def test_backspace_on_empty_is_noop(self, session, press, no_generate):
        after, _ = press(session, "backspace", generate=no_generate)
        assert after == session

    def test_enter_advances_even_when_empty(self, session, press, no_generate):
        after, _ = press(session, "enter", generate=no_generate)
        assert after.stage is Stage.CONFIRM_SCREEN
        assert after.description_buffer == ""


# ---------------------------------------------------------------------------
# Confirm screen
# ---------------------------------------------------------------------------


class TestConfirmScreen:
    @pytest.fixture
    def session(self) -> Session:
        return Session(
            stage=Stage.CONFIRM_SCREEN,
            name_buffer="test-plugin",
            description_buffer="A test plugin",
        )

    @pytest.mark.parametrize("accept", ["y", "Y"])
    def test_accept_calls_generate_and_finishes(self, session, press, accept, tmp_path: Path):
        calls: list[tuple[str, str]] = []

        def fake_generate(name: str, description: str) -> Path:
            calls.append((name, description))
            return tmp_path / name

        after, command = press(session, accept, generate=fake_generate)
        assert calls == [("test-plugin", "A test plugin")]
        assert after.stage is Stage.DONE
        assert after.last_error is None
        assert after.project_root == tmp_path / "test-plugin"
        assert command is Command.NONE

    def test_accept_stores_generation_error(self, session, press):
        error = DirectoryCreationError("failed to create plugin directory: denied")

        def failing_generate(name: str, description: str) -> Path:
            raise error

        after, _ = press(session, "y", generate=failing_generate)
        assert after.stage is Stage.DONE
        assert after.last_error is error
        assert after.project_root is None

    def test_unexpected_exceptions_propagate(self, session, press):
        def broken_generate(name: str, description: str) -> Path:
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            press(session, "y", generate=broken_generate)

    @pytest.mark.parametrize("decline", ["n", "N"])
    def test_decline_returns_to_name_input_with_cleared_buffers(
        self, session, press, no_generate, decline
    ):
        after, _ = press(session, decline, generate=no_generate)
        assert after.stage is Stage.NAME_INPUT
        assert after.name_buffer == ""
        assert after.description_buffer == ""

    @pytest.mark.parametrize("other", ["enter", "backspace", "x", "yes"])
    def test_other_keys_are_noops(self, session, press, no_generate, other):
        after, command = press(session, other, generate=no_generate)
        assert after == session
        assert command is Command.NONE


# ---------------------------------------------------------------------------
# Done
# ---------------------------------------------------------------------------


class TestDone:
    @pytest.mark.parametrize("other", ["y", "n", "enter", "backspace", "a"])
    def test_everything_but_quit_is_noop(self, press, no_generate, other):
        session = Session(stage=Stage.DONE, name_buffer="p")
        after, command = press(session, other, generate=no_generate)
        assert after == session
        assert command is Command.NONE


# ---------------------------------------------------------------------------
# Quit
# ---------------------------------------------------------------------------


class TestQuit:
    @pytest.mark.parametrize(
        "session",
        [
            Session(),
            Session(name_buffer="half-typ"),
            Session(stage=Stage.DESCRIPTION_INPUT, name_buffer="p", description_buffer="mid"),
            Session(stage=Stage.CONFIRM_SCREEN, name_buffer="p", description_buffer="d"),
            Session(stage=Stage.DONE, name_buffer="p"),
        ],
        ids=["name-empty", "name-editing", "description", "confirm", "done"],
    )
    @pytest.mark.parametrize("quit_key", ["q", "ctrl+c"])
    def test_quit_from_every_stage(self, session, quit_key, press, no_generate):
        after, command = press(session, quit_key, generate=no_generate)
        assert command is Command.QUIT
        assert after == session

    def test_q_cannot_be_typed_into_a_name(self, press, no_generate):
        session, command = press(Session(), "a", "q", "b", generate=no_generate)
        assert command is Command.QUIT
        assert session.name_buffer == "a"


# ---------------------------------------------------------------------------
# Unknown events
# ---------------------------------------------------------------------------


class TestUnknownEvents:
    @pytest.mark.parametrize("stage", list(Stage))
    def test_unknown_key_is_noop(self, stage, no_generate):
        session = Session(stage=stage, name_buffer="p", description_buffer="d")
        after, command = update(session, KeyEvent(KeyKind.UNKNOWN, "\x1b[A"), no_generate)
        assert after == session
        assert command is Command.NONE
