"""Linear undo/redo log of inverse-describing edit operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class OpKind(str, Enum):
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Operation:
    """One recorded edit: ``text`` was inserted at, or deleted from, ``pos``."""

    kind: OpKind
    pos: int
    text: bytes

    @property
    def len(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.pos + len(self.text)


class UndoLog:
    """Operations ``[0, boundary)`` are applied, ``[boundary, count)`` undone.

    Pushing a new operation discards the undone tail, so there is no
    branching: an edit made after an undo forgets the redo history.
    """

    def __init__(self) -> None:
        self._entries: List[Operation] = []
        self._boundary: int = 0

    @property
    def boundary(self) -> int:
        return self._boundary

    def __len__(self) -> int:
        return len(self._entries)

    def push_insert(self, pos: int, text: bytes) -> Operation:
        return self._push(Operation(OpKind.INSERT, pos, bytes(text)))

    def push_delete(self, pos: int, text: bytes) -> Operation:
        return self._push(Operation(OpKind.DELETE, pos, bytes(text)))

    def _push(self, entry: Operation) -> Operation:
        del self._entries[self._boundary :]
        self._entries.append(entry)
        self._boundary = len(self._entries)
        return entry

    def can_undo(self) -> bool:
        return self._boundary > 0

    def can_redo(self) -> bool:
        return self._boundary < len(self._entries)

    def undo(self) -> Optional[Operation]:
        if not self.can_undo():
            return None
        self._boundary -= 1
        return self._entries[self._boundary]

    def redo(self) -> Optional[Operation]:
        if not self.can_redo():
            return None
        entry = self._entries[self._boundary]
        self._boundary += 1
        return entry

    def peek_undo(self) -> Optional[Operation]:
        return self._entries[self._boundary - 1] if self.can_undo() else None

    def peek_redo(self) -> Optional[Operation]:
        return self._entries[self._boundary] if self.can_redo() else None

    def clear(self) -> None:
        self._entries.clear()
        self._boundary = 0


__all__ = ["OpKind", "Operation", "UndoLog"]
