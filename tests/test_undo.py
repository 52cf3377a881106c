from __future__ import annotations

import pytest

from edit_engine.buffer import AllocationFailure, OpKind, Operation, TextStore, UndoLog
from edit_engine.runtime.config import EngineConfig


def make_store(text: bytes = b"") -> TextStore:
    return TextStore.from_text(text)


def test_undo_log_is_linear() -> None:
    log = UndoLog()
    log.push_insert(0, b"a")
    log.push_insert(1, b"b")

    assert log.undo() == Operation(OpKind.INSERT, 1, b"b")
    assert log.boundary == 1
    assert log.can_redo() is True

    log.push_delete(0, b"a")

    assert len(log) == 2
    assert log.can_redo() is False
    assert log.redo() is None


def test_undo_log_clear() -> None:
    log = UndoLog()
    log.push_insert(0, b"abc")

    log.clear()

    assert len(log) == 0
    assert log.can_undo() is False
    assert log.undo() is None


def test_operation_span() -> None:
    op = Operation(OpKind.DELETE, 4, b"xyz")

    assert op.len == 3
    assert op.end == 7


def test_character_inserts_undo_one_at_a_time() -> None:
    store = make_store()
    for char in "abc":
        store.insert_char(char)

    store.undo()
    assert store.text() == b"ab"
    assert store.cursor == 2

    store.undo()
    store.undo()
    assert store.text() == b""
    assert store.cursor == 0
    assert store.undo() is None

    store.redo()
    assert store.text() == b"a"
    assert store.cursor == 1


def test_bulk_insert_is_a_single_step() -> None:
    store = make_store()
    store.insert_text(b"hello world")

    store.undo()
    assert store.text() == b""

    store.redo()
    assert store.text() == b"hello world"
    assert store.cursor == 11


def test_delete_range_round_trip() -> None:
    store = make_store(b"hello world")

    store.delete_range(5, 11)
    assert store.text() == b"hello"

    store.undo()
    assert store.text() == b"hello world"
    assert store.cursor == 5

    store.redo()
    assert store.text() == b"hello"
    assert store.cursor == 5


def test_edit_after_undo_discards_redo() -> None:
    store = make_store()
    store.insert_char("a")
    store.insert_char("b")
    store.undo()

    store.insert_char("c")

    assert store.text() == b"ac"
    assert store.undo_log.can_redo() is False
    assert store.redo() is None
    assert store.text() == b"ac"


def test_undo_and_redo_mark_modified() -> None:
    store = make_store(b"abc")
    store.move_cursor_to(3)
    store.insert_char("d")
    store.modified = False

    store.undo()
    assert store.modified is True

    store.modified = False
    store.redo()
    assert store.modified is True


def test_undo_restores_deleted_newline() -> None:
    store = make_store(b"ab\ncd")
    store.move_cursor_to(3)
    store.delete_backward()

    store.undo()

    assert store.text() == b"ab\ncd"
    assert store.cursor == 2
    assert store.line_col() == (0, 2)


def test_undo_never_pushes_to_the_log() -> None:
    store = make_store()
    store.insert_text(b"one")
    store.insert_text(b" two")

    store.undo()
    store.undo()
    store.redo()

    assert len(store.undo_log) == 2
    assert store.undo_log.boundary == 1


def full_store() -> TextStore:
    config = EngineConfig(initial_capacity=64, max_capacity=64)
    return TextStore.from_text(b"a" * 64, config=config)


def test_failed_undo_keeps_boundary() -> None:
    store = full_store()
    store.undo_log.push_delete(0, b"zz")

    with pytest.raises(AllocationFailure):
        store.undo()

    assert store.undo_log.boundary == 1
    assert store.undo_log.can_undo() is True
    assert store.text() == b"a" * 64
    assert store.cursor == 0


def test_failed_redo_keeps_boundary() -> None:
    store = full_store()
    store.undo_log.push_insert(0, b"zz")
    store.undo_log.undo()

    with pytest.raises(AllocationFailure):
        store.redo()

    assert store.undo_log.boundary == 0
    assert store.undo_log.can_redo() is True
    assert store.text() == b"a" * 64
