"""Cursor and selection state tracked alongside the gap buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

NEWLINE = 0x0A

Position = Tuple[int, int]  # (line, column), both 0-indexed
Span = Tuple[int, int]  # half-open byte range


@dataclass(slots=True)
class CursorState:
    """Byte offset of the cursor plus its cached line/column.

    ``line``/``col`` must always equal what a scan of ``[0, offset)`` yields;
    the text store keeps them in step after every mutation.
    """

    offset: int = 0
    line: int = 0
    col: int = 0

    @property
    def position(self) -> Position:
        return (self.line, self.col)

    def reset(self) -> None:
        self.offset = 0
        self.line = 0
        self.col = 0

    def advance(self, byte: int) -> None:
        """Step over ``byte`` which now sits just before the cursor."""

        self.offset += 1
        if byte == NEWLINE:
            self.line += 1
            self.col = 0
        else:
            self.col += 1


@dataclass(slots=True)
class Selection:
    """Anchor plus live cursor; ``start``/``end`` are their ordered pair.

    The model does not follow the cursor by itself: callers run ``update``
    after every move while a selection is active.
    """

    active: bool = False
    anchor: int = 0
    start: int = 0
    end: int = 0

    def begin(self, cursor: int) -> None:
        self.active = True
        self.anchor = self.start = self.end = cursor

    def update(self, cursor: int) -> None:
        if not self.active:
            return
        if cursor < self.anchor:
            self.start, self.end = cursor, self.anchor
        else:
            self.start, self.end = self.anchor, cursor

    def clear(self) -> None:
        self.active = False
        self.anchor = self.start = self.end = 0

    def is_empty(self) -> bool:
        return not self.active or self.start == self.end

    @property
    def span(self) -> Optional[Span]:
        if self.is_empty():
            return None
        return (self.start, self.end)


__all__ = ["NEWLINE", "Position", "Span", "CursorState", "Selection"]
