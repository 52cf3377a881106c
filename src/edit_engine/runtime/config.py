"""Engine configuration resolved from defaults and ``EDIT_ENGINE_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

ENV_PREFIX = "EDIT_ENGINE_"

MIN_CAPACITY = 64
DEFAULT_CAPACITY = 4096
DEFAULT_TAB_WIDTH = 4
DEFAULT_HISTORY_CAPACITY = 64


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Tunables shared by the text store, history and command layer."""

    initial_capacity: int = DEFAULT_CAPACITY
    max_capacity: Optional[int] = None
    tab_width: int = DEFAULT_TAB_WIDTH
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    prescan_syntax: bool = True

    def __post_init__(self) -> None:
        if self.initial_capacity < MIN_CAPACITY:
            object.__setattr__(self, "initial_capacity", MIN_CAPACITY)
        if self.max_capacity is not None and self.max_capacity < self.initial_capacity:
            raise ValueError("max_capacity cannot be below initial_capacity")
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")
        if self.history_capacity < 1:
            raise ValueError("history_capacity must be positive")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            initial_capacity=_env_int("INITIAL_CAPACITY", DEFAULT_CAPACITY)
            or DEFAULT_CAPACITY,
            max_capacity=_env_int("MAX_CAPACITY", None),
            tab_width=_env_int("TAB_WIDTH", DEFAULT_TAB_WIDTH) or DEFAULT_TAB_WIDTH,
            history_capacity=_env_int("HISTORY_CAPACITY", DEFAULT_HISTORY_CAPACITY)
            or DEFAULT_HISTORY_CAPACITY,
            prescan_syntax=_env_flag("PRESCAN_SYNTAX", True),
        )

    def with_overrides(self, **changes: object) -> "EngineConfig":
        return replace(self, **changes)


__all__ = [
    "ENV_PREFIX",
    "MIN_CAPACITY",
    "DEFAULT_CAPACITY",
    "DEFAULT_TAB_WIDTH",
    "DEFAULT_HISTORY_CAPACITY",
    "EngineConfig",
]
