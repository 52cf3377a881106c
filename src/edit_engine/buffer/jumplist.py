"""Bounded back/forward history of visited byte offsets."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from edit_engine.runtime.config import DEFAULT_HISTORY_CAPACITY


class PositionHistory:
    """Jump list independent of the undo log.

    ``index`` equals the entry count after a push and points at the current
    entry after a jump back. Pushing while positioned inside the list drops
    the forward entries first; once ``capacity`` is reached the oldest entry
    is evicted.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._positions: Deque[int] = deque(maxlen=capacity)
        self._index = 0

    @property
    def capacity(self) -> int:
        return self._positions.maxlen or 0

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._positions)

    def entries(self) -> tuple[int, ...]:
        return tuple(self._positions)

    def push(self, pos: int) -> None:
        # after a jump back ``index`` sits on the current entry; keep it
        while len(self._positions) > self._index + 1:
            self._positions.pop()
        if self._positions and self._positions[-1] == pos:
            self._index = len(self._positions)
            return
        self._positions.append(pos)
        self._index = len(self._positions)

    def can_go_back(self) -> bool:
        return self._index > 0

    def can_go_forward(self) -> bool:
        return self._index < len(self._positions) - 1

    def back(self, current_pos: int) -> int:
        """Step back one entry, remembering ``current_pos`` when at the end."""

        if self._index <= 0:
            return current_pos
        if self._index == len(self._positions):
            self.push(current_pos)
            self._index -= 1
        if self._index <= 0:
            return current_pos
        self._index -= 1
        return self._positions[self._index]

    def forward(self) -> Optional[int]:
        if not self._positions:
            return None
        if self._index >= len(self._positions) - 1:
            return self._positions[-1]
        self._index += 1
        return self._positions[self._index]

    def clear(self) -> None:
        self._positions.clear()
        self._index = 0


__all__ = ["PositionHistory"]
