"""Cursor motions composed from text store primitives."""

from __future__ import annotations

from typing import Optional

from edit_engine.buffer import TextStore


def is_word_byte(byte: Optional[int]) -> bool:
    """ASCII letters, digits and ``_``; everything else is a boundary."""

    if byte is None:
        return False
    return (
        0x30 <= byte <= 0x39
        or 0x41 <= byte <= 0x5A
        or 0x61 <= byte <= 0x7A
        or byte == 0x5F
    )


def word_left_target(store: TextStore, pos: Optional[int] = None) -> int:
    """Skip the boundary run before ``pos``, then the word run before that."""

    pos = store.cursor if pos is None else pos
    while pos > 0 and not is_word_byte(store.char_at(pos - 1)):
        pos -= 1
    while pos > 0 and is_word_byte(store.char_at(pos - 1)):
        pos -= 1
    return pos


def word_right_target(store: TextStore, pos: Optional[int] = None) -> int:
    """Skip the word run at ``pos``, then the boundary run after it."""

    pos = store.cursor if pos is None else pos
    length = len(store)
    while pos < length and is_word_byte(store.char_at(pos)):
        pos += 1
    while pos < length and not is_word_byte(store.char_at(pos)):
        pos += 1
    return pos


def move_word_left(store: TextStore) -> None:
    store.move_cursor_to(word_left_target(store))


def move_word_right(store: TextStore) -> None:
    store.move_cursor_to(word_right_target(store))


def move_to_document_start(store: TextStore) -> None:
    store.move_cursor_to(0)


def move_to_document_end(store: TextStore) -> None:
    store.move_cursor_to(len(store))


def goto_line(store: TextStore, line: int) -> None:
    """Jump to the start of 1-indexed ``line``; ``line <= 0`` means line 1."""

    if line < 1:
        line = 1
    store.move_cursor_to(store.line_offset(line - 1))


__all__ = [
    "is_word_byte",
    "word_left_target",
    "word_right_target",
    "move_word_left",
    "move_word_right",
    "move_to_document_start",
    "move_to_document_end",
    "goto_line",
]
