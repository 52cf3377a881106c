from __future__ import annotations

import pytest

from edit_engine.buffer import PositionHistory


def make_history(*positions: int, capacity: int = 64) -> PositionHistory:
    history = PositionHistory(capacity)
    for pos in positions:
        history.push(pos)
    return history


def test_back_remembers_current_position_first() -> None:
    history = make_history(10, 20, 30)

    assert history.back(40) == 30
    assert history.entries() == (10, 20, 30, 40)
    assert history.back(30) == 20
    assert history.back(20) == 10
    assert history.can_go_back() is False
    assert history.back(99) == 99


def test_forward_after_back() -> None:
    history = make_history(10, 20, 30)
    history.back(40)
    history.back(30)
    history.back(20)

    assert history.can_go_forward() is True
    assert history.forward() == 20
    assert history.forward() == 30
    assert history.forward() == 40
    assert history.can_go_forward() is False
    assert history.forward() == 40


def test_push_discards_forward_history() -> None:
    history = make_history(10, 20, 30)
    history.back(40)

    history.push(25)

    assert history.entries() == (10, 20, 30, 25)
    assert history.can_go_forward() is False
    assert history.back(50) == 25


def test_oldest_entries_are_evicted() -> None:
    history = make_history(1, 2, 3, 4, 5, capacity=3)

    assert history.entries() == (3, 4, 5)
    assert len(history) == 3
    assert history.capacity == 3


def test_consecutive_duplicates_collapse() -> None:
    history = make_history(5, 5)

    assert len(history) == 1


def test_empty_history() -> None:
    history = PositionHistory()

    assert history.back(7) == 7
    assert history.forward() is None
    assert history.can_go_back() is False
    assert history.can_go_forward() is False


def test_clear() -> None:
    history = make_history(1, 2)

    history.clear()

    assert len(history) == 0
    assert history.index == 0


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        PositionHistory(0)
