"""Selection helpers: word/line/all selection and selection-extending motions."""

from __future__ import annotations

from typing import Callable, Optional

from edit_engine.buffer import TextStore
from edit_engine.buffer.state import Span

from .motion import is_word_byte

Motion = Callable[[TextStore], None]


def _select(store: TextStore, start: int, end: int) -> Span:
    store.move_cursor_to(start)
    store.start_selection()
    store.move_cursor_to(end)
    store.update_selection()
    return (start, end)


def select_word(store: TextStore) -> Optional[Span]:
    """Select the run of bytes sharing the word class of the byte under the cursor."""

    length = len(store)
    if length == 0:
        return None
    pos = store.cursor if store.cursor < length else length - 1
    word = is_word_byte(store.char_at(pos))
    start = pos
    while start > 0 and is_word_byte(store.char_at(start - 1)) == word:
        start -= 1
    end = pos + 1
    while end < length and is_word_byte(store.char_at(end)) == word:
        end += 1
    return _select(store, start, end)


def select_line(store: TextStore) -> Span:
    start, end = store.line_bounds()
    if end < len(store):
        end += 1
    return _select(store, start, end)


def select_all(store: TextStore) -> Span:
    return _select(store, 0, len(store))


def apply_motion(store: TextStore, motion: Motion, *, extend: bool = False) -> None:
    """Run ``motion``; grow the selection when ``extend`` else drop it."""

    if extend:
        if not store.selection.active:
            store.start_selection()
        motion(store)
        store.update_selection()
    else:
        store.clear_selection()
        motion(store)


__all__ = ["Motion", "select_word", "select_line", "select_all", "apply_motion"]
