"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Union

from edit_engine.buffer import PositionHistory, RegisterBank, TextStore
from edit_engine.runtime.config import EngineConfig


@dataclass(frozen=True, slots=True)
class EditCommand:
    """Abstract, already-decoded request dispatched to the active mode.

    ``name`` is a command id such as ``edit.insert_char``. ``text`` carries
    typed characters, ``delta`` a relative amount (characters or lines),
    ``position`` an absolute offset and ``extend`` asks motions to grow the
    selection instead of clearing it.
    """

    name: str
    text: Optional[Union[str, bytes]] = None
    delta: int = 0
    position: Optional[int] = None
    extend: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("command name cannot be empty")

    @property
    def payload(self) -> bytes:
        if self.text is None:
            return b""
        if isinstance(self.text, str):
            return self.text.encode("utf-8")
        return bytes(self.text)


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_command``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    store: TextStore
    history: PositionHistory
    registers: RegisterBank
    bus: ModeBus
    config: EngineConfig = field(default_factory=EngineConfig)
    extras: Dict[str, object] = field(default_factory=dict)

    def push_position(self) -> None:
        self.history.push(self.store.cursor)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_command(
        self, command: EditCommand
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = ["EditCommand", "ModeResult", "ModeBus", "ModeContext", "Mode"]
