"""Text store façade combining the gap buffer, cursor, selection and undo log."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from pathlib import Path
from typing import ContextManager, Optional, Union

from edit_engine.runtime import telemetry
from edit_engine.runtime.config import EngineConfig

from .errors import FileNotReadable, FileNotWritable, NoFilenameSet, PathType
from .gap import GapBuffer
from .state import NEWLINE, CursorState, Position, Selection, Span
from .undo import OpKind, Operation, UndoLog
from .validation import ByteLike, clamp_offset, coerce_byte, coerce_bytes, is_valid_range


class TextStore:
    """Mutable byte document with an edit cursor and a linear undo log.

    Every mutator records its inverse in ``undo_log`` before touching storage.
    Single-byte edits record one entry each; ``insert_text``,
    ``delete_range`` and ``delete_selection`` record one entry per call.
    """

    def __init__(
        self,
        *,
        config: Optional[EngineConfig] = None,
        name: str = "default",
        undo_log: Optional[UndoLog] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.name = name
        self.undo_log = undo_log or UndoLog()
        self.selection = Selection()
        self.modified = False
        self.filename: Optional[str] = None
        self._gap = GapBuffer(
            self.config.initial_capacity, max_capacity=self.config.max_capacity
        )
        self._cursor = CursorState()
        self.logger = telemetry.get_logger("edit_engine.buffer")

    @classmethod
    def from_text(
        cls, data: ByteLike, *, config: Optional[EngineConfig] = None
    ) -> "TextStore":
        """Build a store holding ``data`` with an empty log and the cursor at 0."""

        store = cls(config=config)
        store._gap.replace_all(coerce_bytes(data))
        return store

    # -- queries -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._gap)

    def length(self) -> int:
        return len(self._gap)

    @property
    def capacity(self) -> int:
        return self._gap.capacity

    @property
    def gap_start(self) -> int:
        return self._gap.gap_start

    @property
    def gap_end(self) -> int:
        return self._gap.gap_end

    @property
    def cursor(self) -> int:
        return self._cursor.offset

    @property
    def line(self) -> int:
        return self._cursor.line

    @property
    def col(self) -> int:
        return self._cursor.col

    def line_col(self) -> Position:
        return self._cursor.position

    def char_at(self, pos: int) -> Optional[int]:
        """Byte at ``pos``, or ``None`` outside ``[0, length)``."""

        return self._gap.byte_at(pos)

    def text(self) -> bytes:
        return self._gap.to_bytes()

    def get_range(self, start: int, end: int) -> bytes:
        if not is_valid_range(start, end, len(self._gap)):
            self.logger.debug(f"get_range ignored invalid range [{start}, {end})")
            return b""
        return self._gap.slice(start, end)

    def line_count(self) -> int:
        return self._gap.count(NEWLINE) + 1

    def line_bounds(self, pos: Optional[int] = None) -> Span:
        """``[start, end)`` of the line holding ``pos``, newline excluded."""

        pos = self.cursor if pos is None else clamp_offset(pos, len(self._gap))
        start = self._gap.rindex_of(NEWLINE, pos) + 1
        end = self._gap.index_of(NEWLINE, pos)
        if end == -1:
            end = len(self._gap)
        return (start, end)

    def line_offset(self, line: int) -> int:
        """Offset where 0-indexed ``line`` starts; the document end when past it."""

        pos = 0
        for _ in range(max(0, line)):
            newline = self._gap.index_of(NEWLINE, pos)
            if newline == -1:
                return len(self._gap)
            pos = newline + 1
        return pos

    def find(self, needle: ByteLike, start: int = 0) -> Optional[int]:
        """Offset of the first ``needle`` match at or after ``start``."""

        pattern = coerce_bytes(needle)
        if not pattern:
            self.logger.debug("find ignored empty needle")
            return None
        if start < 0:
            start = 0
        if start + len(pattern) > len(self._gap):
            return None
        found = self._gap.to_bytes().find(pattern, start)
        return None if found == -1 else found

    # -- cursor ------------------------------------------------------------

    def move_cursor_by(self, delta: int) -> None:
        self.move_cursor_to(self.cursor + delta)

    def move_cursor_to(self, pos: int) -> None:
        """Place the cursor and rescan ``[0, pos)`` for its line/column."""

        pos = clamp_offset(pos, len(self._gap))
        last_newline = self._gap.rindex_of(NEWLINE, pos)
        self._cursor.offset = pos
        self._cursor.line = self._gap.count(NEWLINE, 0, pos)
        self._cursor.col = pos - (last_newline + 1)

    def move_to_line_start(self) -> None:
        start, _ = self.line_bounds()
        self._cursor.offset = start
        self._cursor.col = 0

    def move_to_line_end(self) -> None:
        _, end = self.line_bounds()
        self._cursor.col += end - self._cursor.offset
        self._cursor.offset = end

    def move_line(self, delta: int) -> None:
        """Move ``delta`` lines, keeping the column clamped to the target line."""

        target_col = self.col
        target = max(0, min(self.line + delta, self.line_count() - 1))
        start, end = self.line_bounds(self.line_offset(target))
        self.move_cursor_to(start + min(target_col, end - start))

    # -- mutation ----------------------------------------------------------

    def insert_char(self, value: Union[int, ByteLike]) -> None:
        byte = coerce_byte(value)
        pos = self.cursor
        self._gap.reserve(1)
        self.undo_log.push_insert(pos, bytes((byte,)))
        self._gap.insert(pos, bytes((byte,)))
        self._cursor.advance(byte)
        self.modified = True

    def insert_text(self, data: ByteLike) -> None:
        payload = coerce_bytes(data)
        if not payload:
            return
        pos = self.cursor
        with Transaction(self, "insert_text"):
            self._gap.reserve(len(payload))
            self.undo_log.push_insert(pos, payload)
            self._gap.insert(pos, payload)
            self._step_over(payload)
            self.modified = True

    def delete_forward(self) -> bool:
        pos = self.cursor
        byte = self._gap.byte_at(pos)
        if byte is None:
            return False
        self.undo_log.push_delete(pos, bytes((byte,)))
        self._gap.delete(pos, 1)
        self.modified = True
        return True

    def delete_backward(self) -> bool:
        pos = self.cursor
        if pos == 0:
            return False
        byte = self._gap.byte_at(pos - 1)
        assert byte is not None
        self.undo_log.push_delete(pos - 1, bytes((byte,)))
        self._gap.delete_before(pos)
        self._cursor.offset = pos - 1
        if byte == NEWLINE:
            self._cursor.line -= 1
            self._cursor.col = (pos - 1) - (self._gap.rindex_of(NEWLINE, pos - 1) + 1)
        else:
            self._cursor.col -= 1
        self.modified = True
        return True

    def delete_range(self, start: int, end: int) -> Optional[bytes]:
        """Delete ``[start, end)`` as one undo step and park the cursor at ``start``.

        Invalid ranges are ignored and return ``None``.
        """

        if not is_valid_range(start, end, len(self._gap)):
            self.logger.debug(f"delete_range ignored invalid range [{start}, {end})")
            return None
        with Transaction(self, "delete_range"):
            removed = self._gap.slice(start, end)
            self.undo_log.push_delete(start, removed)
            self.move_cursor_to(start)
            self._gap.delete(start, end - start)
            self.modified = True
        return removed

    def _step_over(self, payload: bytes) -> None:
        newlines = payload.count(b"\n")
        self._cursor.offset += len(payload)
        if newlines:
            self._cursor.line += newlines
            self._cursor.col = len(payload) - (payload.rfind(b"\n") + 1)
        else:
            self._cursor.col += len(payload)

    # -- selection ---------------------------------------------------------

    def start_selection(self) -> None:
        self.selection.begin(self.cursor)

    def update_selection(self) -> None:
        self.selection.update(self.cursor)

    def clear_selection(self) -> None:
        self.selection.clear()

    def has_selection(self) -> bool:
        return not self.selection.is_empty()

    def selection_span(self) -> Optional[Span]:
        return self.selection.span

    def get_selection_text(self) -> bytes:
        span = self.selection.span
        if span is None:
            return b""
        return self._gap.slice(*span)

    def delete_selection(self) -> Optional[bytes]:
        span = self.selection.span
        if span is None:
            return None
        start, end = span
        with Transaction(self, "delete_selection"):
            removed = self._gap.slice(start, end)
            self.undo_log.push_delete(start, removed)
            self.move_cursor_to(start)
            self._gap.delete(start, end - start)
            self.modified = True
            self.selection.clear()
        return removed

    # -- undo / redo -------------------------------------------------------

    def undo(self) -> Optional[Operation]:
        """Invert the most recent applied operation; ``None`` when there is none."""

        pending = self.undo_log.peek_undo()
        if pending is None:
            return None
        with Transaction(self, "undo"):
            if pending.kind is OpKind.DELETE:
                self._gap.reserve(pending.len)
            op = self.undo_log.undo()
            assert op is pending
            if op.kind is OpKind.INSERT:
                self._gap.delete(op.pos, op.len)
            else:
                self._gap.insert(op.pos, op.text)
            self.modified = True
            self.move_cursor_to(op.pos)
        return op

    def redo(self) -> Optional[Operation]:
        """Reapply the next undone operation; ``None`` when there is none."""

        pending = self.undo_log.peek_redo()
        if pending is None:
            return None
        with Transaction(self, "redo"):
            if pending.kind is OpKind.INSERT:
                self._gap.reserve(pending.len)
            op = self.undo_log.redo()
            assert op is pending
            if op.kind is OpKind.INSERT:
                self._gap.insert(op.pos, op.text)
                self.move_cursor_to(op.end)
            else:
                self._gap.delete(op.pos, op.len)
                self.move_cursor_to(op.pos)
            self.modified = True
        return op

    # -- persistence -------------------------------------------------------

    def load(self, path: PathType) -> None:
        """Replace the whole content with the bytes at ``path``.

        Raises ``FileNotReadable`` and leaves the store untouched when the
        path cannot be read.
        """

        try:
            payload = Path(path).read_bytes()
        except OSError as exc:
            raise FileNotReadable(f"cannot read {os.fspath(path)}", path=path) from exc

        with Transaction(self, "load"):
            self._gap.replace_all(payload)
            self._cursor.reset()
            self.selection.clear()
            self.undo_log.clear()
            self.modified = False
            self.filename = os.fspath(path)
        telemetry.record_event(
            "buffer.load", data={"path": self.filename, "bytes": len(payload)}
        )

    def save(self) -> None:
        """Write the logical bytes to ``filename`` and clear ``modified``."""

        if self.filename is None:
            raise NoFilenameSet("no filename recorded for this buffer")
        payload = self._gap.to_bytes()
        try:
            Path(self.filename).write_bytes(payload)
        except OSError as exc:
            raise FileNotWritable(
                f"cannot write {self.filename}", path=self.filename
            ) from exc
        self.modified = False
        telemetry.record_event(
            "buffer.save", data={"path": self.filename, "bytes": len(payload)}
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span wrapped around one bulk store mutation."""

    def __init__(self, store: TextStore, label: str) -> None:
        self.store = store
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.store.name, "cursor": self.store.cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["TextStore", "Transaction"]
