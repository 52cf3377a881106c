"""Gap buffer byte storage.

The buffer is a single ``bytearray`` with one movable hole (the gap) kept at
the most recent edit point. Inserting writes into the gap from the left,
deleting forward widens it to the right and deleting backward widens it to
the left. Moving the gap costs O(distance), so sequential typing is O(1)
amortised while a jump to a distant offset pays one O(n) move.
"""

from __future__ import annotations

from typing import Optional

from edit_engine.runtime import telemetry

from .errors import AllocationFailure


class GapBuffer:
    """Contiguous byte storage with a half-open gap ``[gap_start, gap_end)``."""

    __slots__ = ("_data", "_gap_start", "_gap_end", "_max_capacity")

    def __init__(self, capacity: int, *, max_capacity: Optional[int] = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._data = bytearray(capacity)
        self._gap_start = 0
        self._gap_end = capacity
        self._max_capacity = max_capacity

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def gap_start(self) -> int:
        return self._gap_start

    @property
    def gap_end(self) -> int:
        return self._gap_end

    @property
    def gap_size(self) -> int:
        return self._gap_end - self._gap_start

    def __len__(self) -> int:
        return len(self._data) - (self._gap_end - self._gap_start)

    def byte_at(self, pos: int) -> Optional[int]:
        if pos < 0 or pos >= len(self):
            return None
        if pos < self._gap_start:
            return self._data[pos]
        return self._data[self._gap_end + (pos - self._gap_start)]

    def slice(self, start: int, end: int) -> bytes:
        """Return logical bytes ``[start, end)``; bounds must already be valid."""

        gap_start = self._gap_start
        if end <= gap_start:
            return bytes(self._data[start:end])
        shift = self._gap_end - gap_start
        if start >= gap_start:
            return bytes(self._data[start + shift : end + shift])
        return bytes(self._data[start:gap_start]) + bytes(
            self._data[self._gap_end : end + shift]
        )

    def index_of(self, byte: int, start: int = 0) -> int:
        """Logical offset of the first ``byte`` at or after ``start``, else -1."""

        needle = bytes((byte,))
        gap_start, gap_end = self._gap_start, self._gap_end
        if start < gap_start:
            found = self._data.find(needle, start, gap_start)
            if found != -1:
                return found
            start = gap_start
        found = self._data.find(needle, gap_end + (start - gap_start))
        if found == -1:
            return -1
        return found - (gap_end - gap_start)

    def rindex_of(self, byte: int, end: int) -> int:
        """Logical offset of the last ``byte`` before ``end``, else -1."""

        needle = bytes((byte,))
        gap_start, gap_end = self._gap_start, self._gap_end
        if end > gap_start:
            found = self._data.rfind(needle, gap_end, gap_end + (end - gap_start))
            if found != -1:
                return found - (gap_end - gap_start)
            end = gap_start
        return self._data.rfind(needle, 0, end)

    def count(self, byte: int, start: int = 0, end: Optional[int] = None) -> int:
        """Occurrences of ``byte`` in ``[start, end)``, counted in place."""

        if end is None:
            end = len(self)
        if start >= end:
            return 0
        needle = bytes((byte,))
        gap_start = self._gap_start
        shift = self._gap_end - gap_start
        total = 0
        if start < gap_start:
            total += self._data.count(needle, start, min(end, gap_start))
        if end > gap_start:
            total += self._data.count(needle, max(start, gap_start) + shift, end + shift)
        return total

    def to_bytes(self) -> bytes:
        return bytes(self._data[: self._gap_start]) + bytes(
            self._data[self._gap_end :]
        )

    def reserve(self, needed: int) -> None:
        """Grow until the gap holds ``needed`` bytes, doubling the capacity.

        Raises ``AllocationFailure`` without touching the content when the
        allocator refuses or ``max_capacity`` would be exceeded.
        """

        if self.gap_size >= needed:
            return

        length = len(self)
        old_capacity = len(self._data)
        new_capacity = old_capacity * 2
        while new_capacity - length < needed:
            new_capacity *= 2

        if self._max_capacity is not None and new_capacity > self._max_capacity:
            if self._max_capacity - length < needed:
                raise AllocationFailure(
                    f"cannot fit {needed} bytes within max capacity {self._max_capacity}",
                    requested=length + needed,
                    capacity=old_capacity,
                )
            new_capacity = self._max_capacity

        try:
            new_data = bytearray(new_capacity)
        except MemoryError as exc:
            raise AllocationFailure(
                f"could not allocate {new_capacity} bytes",
                requested=new_capacity,
                capacity=old_capacity,
            ) from exc

        tail = old_capacity - self._gap_end
        new_gap_end = new_capacity - tail
        new_data[: self._gap_start] = self._data[: self._gap_start]
        new_data[new_gap_end:] = self._data[self._gap_end :]

        self._data = new_data
        self._gap_end = new_gap_end
        telemetry.record_event(
            "buffer.grow",
            level="debug",
            data={"from": old_capacity, "to": new_capacity, "length": length},
        )

    def move_gap(self, pos: int) -> None:
        data = self._data
        if pos < self._gap_start:
            delta = self._gap_start - pos
            data[self._gap_end - delta : self._gap_end] = data[pos : self._gap_start]
            self._gap_start = pos
            self._gap_end -= delta
        elif pos > self._gap_start:
            delta = pos - self._gap_start
            data[self._gap_start : pos] = data[self._gap_end : self._gap_end + delta]
            self._gap_start += delta
            self._gap_end += delta

    def insert(self, pos: int, payload: bytes) -> None:
        size = len(payload)
        if not size:
            return
        self.reserve(size)
        self.move_gap(pos)
        self._data[self._gap_start : self._gap_start + size] = payload
        self._gap_start += size

    def delete(self, pos: int, count: int) -> None:
        """Remove ``count`` bytes starting at ``pos`` by widening the gap."""

        if count <= 0:
            return
        self.move_gap(pos)
        self._gap_end += count

    def delete_before(self, pos: int) -> None:
        """Remove the byte just before ``pos`` by widening the gap leftwards."""

        self.move_gap(pos)
        self._gap_start -= 1

    def replace_all(self, payload: bytes) -> None:
        """Swap the whole content for ``payload``; growth happens first."""

        self.reserve(max(0, len(payload) - len(self)))
        capacity = len(self._data)
        self._data[: len(payload)] = payload
        self._gap_start = len(payload)
        self._gap_end = capacity


__all__ = ["GapBuffer"]
