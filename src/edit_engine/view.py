"""Read-only query surface a host renderer pulls from each frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from edit_engine.buffer import TextStore
from edit_engine.buffer.state import Position, Span
from edit_engine.runtime.config import EngineConfig
from edit_engine.syntax import (
    INITIAL_STATE,
    Token,
    TokenizerState,
    carried_state,
    tokenize_lines,
)

NO_NAME = "[No Name]"


@dataclass(slots=True)
class RenderLine:
    """One visible line with its tokens; ``number`` is 0-indexed."""

    number: int
    offset: int
    text: bytes
    tokens: tuple[Token, ...] = ()


@dataclass(slots=True)
class StatusSnapshot:
    filename: str
    modified: bool
    line: int
    col: int
    message: Optional[str] = None

    @property
    def label(self) -> str:
        marker = " [+]" if self.modified else ""
        return f"{self.filename}{marker}  Ln {self.line + 1}, Col {self.col + 1}"


@dataclass(slots=True)
class ViewSnapshot:
    """Host-friendly snapshot of the visible window."""

    lines: List[RenderLine]
    cursor: Position
    selection: Optional[Span]
    status: StatusSnapshot
    attributes: dict[str, str] = field(default_factory=dict)


class RenderView:
    """Answers the questions a renderer asks without exposing the gap buffer."""

    def __init__(
        self, store: TextStore, *, config: Optional[EngineConfig] = None
    ) -> None:
        self.store = store
        self.config = config or store.config

    def line_count(self) -> int:
        return self.store.line_count()

    def byte_at(self, pos: int) -> Optional[int]:
        return self.store.char_at(pos)

    def cursor_position(self) -> Position:
        return self.store.line_col()

    def selection_span(self) -> Optional[Span]:
        return self.store.selection_span()

    def line_offset(self, line: int) -> int:
        return self.store.line_offset(line)

    def line_text(self, line: int) -> bytes:
        if line < 0 or line >= self.store.line_count():
            return b""
        return next(self._walk_lines(line, 1))[1]

    def carried_state_before(self, line: int) -> TokenizerState:
        """Block-comment state in effect at the start of ``line``."""

        if line <= 0:
            return INITIAL_STATE
        return carried_state(text for _, text in self._walk_lines(0, line))

    def visible_lines(
        self,
        first: int,
        count: int,
        state: Optional[TokenizerState] = None,
    ) -> List[RenderLine]:
        """Tokenize ``count`` lines from ``first``.

        Only the window is read from the store. Without an explicit ``state``
        the lines above the window are walked for the carried flag when
        ``prescan_syntax`` is enabled.
        """

        first = max(0, first)
        if first >= self.store.line_count() or count <= 0:
            return []
        if state is None:
            state = (
                self.carried_state_before(first)
                if self.config.prescan_syntax
                else INITIAL_STATE
            )

        window = list(self._walk_lines(first, count))
        results = tokenize_lines((text for _, text in window), state)
        return [
            RenderLine(number=number, offset=offset, text=text, tokens=result.tokens)
            for number, ((offset, text), result) in enumerate(
                zip(window, results), start=first
            )
        ]

    def _walk_lines(self, first: int, count: int) -> Iterator[tuple[int, bytes]]:
        """Yield ``(offset, text)`` for up to ``count`` lines from ``first``."""

        store = self.store
        length = len(store)
        pos = store.line_offset(first)
        for _ in range(count):
            start, end = store.line_bounds(pos)
            yield start, store.get_range(start, end) if end > start else b""
            if end >= length:
                return
            pos = end + 1

    def status(self, message: Optional[str] = None) -> StatusSnapshot:
        line, col = self.store.line_col()
        return StatusSnapshot(
            filename=self.store.filename or NO_NAME,
            modified=self.store.modified,
            line=line,
            col=col,
            message=message,
        )

    def snapshot(
        self,
        first: int = 0,
        count: Optional[int] = None,
        *,
        message: Optional[str] = None,
    ) -> ViewSnapshot:
        if count is None:
            count = self.line_count()
        return ViewSnapshot(
            lines=self.visible_lines(first, count),
            cursor=self.cursor_position(),
            selection=self.selection_span(),
            status=self.status(message),
        )


__all__ = [
    "NO_NAME",
    "RenderLine",
    "StatusSnapshot",
    "ViewSnapshot",
    "RenderView",
]
