"""Compound edits built from text store primitives.

Each helper goes through ``insert_text``/``delete_range`` so the undo log
sees one entry per primitive step.
"""

from __future__ import annotations

from typing import Optional

from edit_engine.buffer import TextStore
from edit_engine.buffer.validation import ByteLike, coerce_bytes

from .motion import word_left_target, word_right_target


def _line_text(store: TextStore, start: int, end: int) -> bytes:
    return store.get_range(start, end) if end > start else b""


def delete_word_backward(store: TextStore) -> Optional[bytes]:
    target = word_left_target(store)
    if target >= store.cursor:
        return None
    return store.delete_range(target, store.cursor)


def delete_word_forward(store: TextStore) -> Optional[bytes]:
    target = word_right_target(store)
    if target <= store.cursor:
        return None
    return store.delete_range(store.cursor, target)


def duplicate_line(store: TextStore) -> None:
    """Insert a copy of the current line below it and move into the copy."""

    start, end = store.line_bounds()
    col = store.cursor - start
    text = _line_text(store, start, end)
    store.move_cursor_to(end)
    store.insert_text(b"\n" + text)
    store.move_cursor_to(end + 1 + col)


def delete_line(store: TextStore) -> Optional[bytes]:
    """Delete the current line with its newline.

    A final line without a trailing newline takes the preceding newline with
    it so no empty line is left behind.
    """

    start, end = store.line_bounds()
    if end < len(store):
        return store.delete_range(start, end + 1)
    if start > 0:
        removed = store.delete_range(start - 1, end)
        store.move_to_line_start()
        return removed
    if end > start:
        return store.delete_range(start, end)
    return None


def move_line_up(store: TextStore) -> bool:
    start, end = store.line_bounds()
    if start == 0:
        return False
    prev_start, _ = store.line_bounds(start - 1)
    col = store.cursor - start
    text = _line_text(store, start, end)
    store.delete_range(start - 1, end)
    store.move_cursor_to(prev_start)
    store.insert_text(text + b"\n")
    store.move_cursor_to(prev_start + col)
    return True


def move_line_down(store: TextStore) -> bool:
    start, end = store.line_bounds()
    if end >= len(store):
        return False
    _, next_end = store.line_bounds(end + 1)
    next_len = next_end - (end + 1)
    col = store.cursor - start
    text = _line_text(store, start, end)
    store.delete_range(start, end + 1)
    insert_at = start + next_len
    store.move_cursor_to(insert_at)
    store.insert_text(b"\n" + text)
    store.move_cursor_to(insert_at + 1 + col)
    return True


def replace_selection(store: TextStore, data: ByteLike) -> None:
    """Type over a non-empty selection, or plain-insert without one."""

    payload = coerce_bytes(data)
    if store.has_selection():
        store.delete_selection()
    else:
        store.clear_selection()
    store.insert_text(payload)


__all__ = [
    "delete_word_backward",
    "delete_word_forward",
    "duplicate_line",
    "delete_line",
    "move_line_up",
    "move_line_down",
    "replace_selection",
]
