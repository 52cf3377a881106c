from __future__ import annotations

from pathlib import Path
from typing import Any, List

import pytest

from edit_engine.buffer import PositionHistory, RegisterBank, TextStore
from edit_engine.buffer.registers import RegisterValue
from edit_engine.modes import EditMode, FindMode, ModeBus, ModeContext
from edit_engine.runtime.config import EngineConfig
from edit_engine.session import EditorSession, create_editor, open_file


def make_editor(text: bytes = b"", **config: Any) -> EditorSession:
    session = create_editor(EngineConfig(**config) if config else None)
    store = session.store
    store.insert_text(text)
    store.undo_log.clear()
    store.move_cursor_to(0)
    store.modified = False
    return session


def test_editor_starts_in_edit_mode() -> None:
    session = make_editor()

    assert session.mode == "edit"
    assert set(session.manager.mode_names) == {"edit", "find", "goto"}


def test_typing_replaces_selection() -> None:
    session = make_editor(b"hello world")
    session.dispatch("select.all")

    result = session.dispatch("edit.insert_char", text="x")

    assert result.consumed is True
    assert session.store.text() == b"x"
    assert session.store.has_selection() is False


def test_insert_newline_and_tab_width() -> None:
    session = make_editor(tab_width=2)

    session.dispatch("edit.insert_tab")
    session.dispatch("edit.insert_newline")

    assert session.store.text() == b"  \n"
    assert session.store.line_col() == (1, 0)


def test_backspace_with_selection_only_removes_selection() -> None:
    session = make_editor(b"hello there")
    session.dispatch("select.word")

    session.dispatch("edit.delete_backward")

    assert session.store.text() == b" there"


def test_motion_commands_extend_and_clear_selection() -> None:
    session = make_editor(b"hello")

    session.dispatch("cursor.move_by", delta=3, extend=True)
    assert session.store.selection_span() == (0, 3)

    session.dispatch("cursor.move_by", delta=1)
    assert session.store.selection_span() is None
    assert session.store.cursor == 4

    session.dispatch("cursor.move_to", position=1)
    assert session.store.cursor == 1


def test_move_to_without_position_is_not_consumed() -> None:
    session = make_editor(b"hello")

    result = session.dispatch("cursor.move_to")

    assert result.consumed is False


def test_clipboard_round_trip() -> None:
    session = make_editor(b"hello world")
    session.dispatch("select.word")

    assert session.dispatch("clipboard.copy").message == "Copied"

    session.dispatch("cursor.document_end")
    assert session.dispatch("clipboard.paste").message == "Pasted"
    assert session.store.text() == b"hello worldhello"

    session.dispatch("select.all")
    assert session.dispatch("clipboard.cut").message == "Cut"
    assert session.store.text() == b""
    assert session.context.registers.get().data == b"hello worldhello"


def test_copy_without_selection() -> None:
    session = make_editor(b"abc")

    result = session.dispatch("clipboard.copy")

    assert result.status == "no_selection"
    assert result.message is None


def test_paste_prefers_host_clipboard() -> None:
    class HostRegisters(RegisterBank):
        def clipboard_get(self) -> bytes:
            return b"from host"

    session = create_editor(registers=HostRegisters())

    session.dispatch("clipboard.paste")

    assert session.store.text() == b"from host"


def test_undo_and_redo_report_status() -> None:
    session = make_editor()
    session.dispatch("edit.insert_char", text="a")

    assert session.dispatch("history.undo").message == "Undo"
    assert session.store.text() == b""
    assert session.dispatch("history.redo").message == "Redo"
    assert session.store.text() == b"a"


def test_line_commands() -> None:
    session = make_editor(b"ab")

    session.dispatch("line.duplicate")
    assert session.store.text() == b"ab\nab"

    session.dispatch("line.move_up")
    session.dispatch("line.delete")
    assert session.store.text() == b"ab"


def test_find_mode_selects_matches_and_wraps() -> None:
    session = make_editor(b"foo bar foo")
    matches: List[Any] = []
    session.context.bus.subscribe("find.match", matches.append)

    assert session.dispatch("find.start").message == "Find: "
    assert session.mode == "find"
    assert session.dispatch("edit.insert_char", text="foo").message == "Find: foo"

    result = session.dispatch("edit.insert_newline")
    assert result.message == "Found. Enter: next, Esc: done"
    assert session.mode == "find"
    assert session.store.selection_span() == (8, 11)
    assert session.store.cursor == 11
    assert session.context.history.entries() == (0,)

    session.dispatch("edit.insert_newline")
    assert session.store.selection_span() == (0, 3)

    session.dispatch("select.clear")
    assert session.mode == "edit"
    assert session.store.text() == b"foo bar foo"
    assert matches == [{"offset": 8, "length": 3}, {"offset": 0, "length": 3}]


def test_find_mode_not_found_and_backspace() -> None:
    session = make_editor(b"abc")
    session.dispatch("find.start")
    session.dispatch("edit.insert_char", text="zz")

    assert session.dispatch("edit.delete_backward").message == "Find: z"
    assert session.dispatch("edit.insert_newline").message == "Not found"
    assert session.store.cursor == 0
    assert session.store.text() == b"abc"


def test_goto_mode_accepts_digits_only() -> None:
    session = make_editor(b"a\nb\nc\nd")
    session.dispatch("goto.start")
    assert session.mode == "goto"

    assert session.dispatch("edit.insert_char", text="x3y").message == "Goto line: 3"
    result = session.dispatch("edit.insert_newline")

    assert result.message == "Jumped to line 3"
    assert session.mode == "edit"
    assert session.store.line_col() == (2, 0)
    assert session.context.history.can_go_back() is True


def test_goto_mode_with_empty_input_returns_to_edit() -> None:
    session = make_editor(b"a\nb")
    session.dispatch("goto.start")

    result = session.dispatch("edit.insert_newline")

    assert result.message is None
    assert session.mode == "edit"
    assert session.store.cursor == 0


def test_jump_back_and_forward() -> None:
    session = make_editor(b"a\nb\nc\nd")
    session.dispatch("goto.start")
    session.dispatch("edit.insert_char", text="3")
    session.dispatch("edit.insert_newline")

    session.dispatch("jump.back")
    assert session.store.cursor == 0

    session.dispatch("jump.forward")
    assert session.store.cursor == 4


def test_jump_without_history() -> None:
    session = make_editor(b"abc")

    assert session.dispatch("jump.back").status == "no_history"
    assert session.dispatch("jump.forward").status == "no_history"


def test_document_motions_record_jump_history() -> None:
    session = make_editor(b"abc")
    session.store.move_cursor_to(1)

    session.dispatch("cursor.document_end")

    assert session.context.history.entries() == (1,)
    assert session.store.cursor == 3


def test_save_reports_status(tmp_path: Path) -> None:
    session = make_editor(b"text")

    assert session.dispatch("file.save").message == "Error: Could not save file"

    target = tmp_path / "out.txt"
    assert session.open(target) == "New file"
    assert session.store.filename == str(target)
    assert session.store.text() == b"text"

    assert session.dispatch("file.save").message == "Saved"
    assert target.read_bytes() == b"text"


def test_open_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "in.c"
    target.write_bytes(b"int x;\n")
    session = make_editor()

    assert open_file(session.context, target) == f"Opened: {target}"
    assert session.store.text() == b"int x;\n"


def test_create_editor_with_path(tmp_path: Path) -> None:
    target = tmp_path / "start.txt"
    target.write_bytes(b"hi")

    session = create_editor(path=target)

    assert session.store.text() == b"hi"
    assert session.context.extras["status_message"] == f"Opened: {target}"


def test_unknown_command_is_not_consumed() -> None:
    session = make_editor()

    result = session.dispatch("nope.command")

    assert result.consumed is False
    assert result.status == "miss"


def test_mode_manager_guards() -> None:
    session = make_editor()

    with pytest.raises(KeyError):
        session.manager.switch_mode("visual")
    with pytest.raises(ValueError):
        session.manager.register_mode(FindMode)


def test_edit_mode_requires_registry() -> None:
    context = ModeContext(
        store=TextStore(),
        history=PositionHistory(),
        registers=RegisterBank(),
        bus=ModeBus(),
    )

    with pytest.raises(RuntimeError):
        EditMode(context)


def test_yank_fills_unnamed_register_and_host_clipboard() -> None:
    pushed: List[bytes] = []

    class HostRegisters(RegisterBank):
        def clipboard_set(self, data: bytes) -> None:
            pushed.append(data)

    registers = HostRegisters()
    registers.yank_to("a", b"word")

    assert registers.get("a") == RegisterValue(data=b"word")
    assert registers.paste_from().data == b"word"
    assert pushed == [b"word"]
