"""Substring search over the text store."""

from __future__ import annotations

from typing import Optional

from edit_engine.buffer import TextStore
from edit_engine.buffer.validation import ByteLike


def find(store: TextStore, needle: ByteLike, from_pos: int = 0) -> Optional[int]:
    """First match at or after ``from_pos``; ``None`` when absent or empty."""

    return store.find(needle, from_pos)


def find_next(store: TextStore, needle: ByteLike) -> Optional[int]:
    """Search past the cursor; callers decide whether to wrap."""

    return store.find(needle, store.cursor + 1)


def find_wrapping(store: TextStore, needle: ByteLike) -> Optional[int]:
    found = find_next(store, needle)
    if found is None:
        found = store.find(needle, 0)
    return found


__all__ = ["find", "find_next", "find_wrapping"]
