from __future__ import annotations

import pytest

from edit_engine.commands import (
    DEFAULT_COMMANDS,
    CommandRef,
    CommandRegistry,
    UnknownCommandError,
    load_default_commands,
)

EXPECTED_DEFAULT_IDS = {
    "edit.insert_char",
    "edit.insert_newline",
    "edit.insert_tab",
    "edit.delete_forward",
    "edit.delete_backward",
    "edit.delete_word_forward",
    "edit.delete_word_backward",
    "cursor.move_by",
    "cursor.move_to",
    "cursor.move_line",
    "cursor.line_start",
    "cursor.line_end",
    "cursor.document_start",
    "cursor.document_end",
    "cursor.word_left",
    "cursor.word_right",
    "select.word",
    "select.line",
    "select.all",
    "select.clear",
    "clipboard.cut",
    "clipboard.copy",
    "clipboard.paste",
    "history.undo",
    "history.redo",
    "find.start",
    "goto.start",
    "line.duplicate",
    "line.delete",
    "line.move_up",
    "line.move_down",
    "jump.back",
    "jump.forward",
    "file.save",
}


def make_command(command_id: str = "test.noop") -> CommandRef:
    return CommandRef(id=command_id, handler=lambda *args, **kwargs: command_id)


def test_register_and_execute() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    assert "test.noop" in registry
    assert registry.execute("test.noop") == "test.noop"
    assert registry.revision() == 1


def test_duplicate_registration_requires_replace() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    with pytest.raises(ValueError):
        registry.register(make_command())

    replacement = CommandRef(id="test.noop", handler=lambda *args: "replaced")
    registry.register(replacement, replace=True)
    assert registry.execute("test.noop") == "replaced"


def test_unknown_command() -> None:
    registry = CommandRegistry()

    with pytest.raises(UnknownCommandError) as excinfo:
        registry.execute("missing.command")

    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.command_id == "missing.command"
    assert registry.lookup("missing.command") is None


def test_unregister() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    assert registry.unregister("test.noop") is not None
    assert registry.unregister("test.noop") is None
    assert len(registry) == 0


def test_revision_and_lookup_track_changes() -> None:
    registry = CommandRegistry()
    command = make_command()

    registry.register(command)
    assert registry.lookup("test.noop") is command
    assert registry.revision() == 1

    registry.register(make_command(), replace=True)
    assert registry.revision() == 2

    registry.unregister("test.noop")
    registry.unregister("test.noop")
    assert registry.revision() == 3
    assert registry.lookup("test.noop") is None


def test_command_ref_validation() -> None:
    with pytest.raises(ValueError):
        CommandRef(id="", handler=lambda: None)
    with pytest.raises(TypeError):
        CommandRef(id="bad.handler", handler="not callable")  # type: ignore[arg-type]

    ref = make_command("clipboard.copy")
    assert ref.group == "clipboard"
    assert ref.telemetry_name == "clipboard.copy"


def test_default_commands_cover_the_standard_set() -> None:
    registry = CommandRegistry()

    load_default_commands(registry)

    assert {command.id for command in registry.iter_commands()} == EXPECTED_DEFAULT_IDS
    assert len(DEFAULT_COMMANDS) == len(EXPECTED_DEFAULT_IDS)
    assert registry.stats().groups == (
        "clipboard",
        "cursor",
        "edit",
        "file",
        "find",
        "goto",
        "history",
        "jump",
        "line",
        "select",
    )


def test_default_command_filters() -> None:
    registry = CommandRegistry()

    load_default_commands(
        registry,
        include=["history.undo", "history.redo", "file.save"],
        exclude=["file.save"],
        extra_commands=[make_command("custom.hello")],
    )

    assert {command.id for command in registry.iter_commands()} == {
        "history.undo",
        "history.redo",
        "custom.hello",
    }
    assert [command.id for command in registry.iter_commands("history")] == [
        "history.undo",
        "history.redo",
    ]
