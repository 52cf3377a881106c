"""Editor assembly: wires the store, histories, registry and modes together."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from edit_engine.buffer import (
    FileNotReadable,
    PositionHistory,
    RegisterBank,
    TextStore,
)
from edit_engine.buffer.errors import PathType
from edit_engine.commands import CommandRegistry, load_default_commands
from edit_engine.modes import (
    EditCommand,
    EditMode,
    FindMode,
    GotoMode,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
)
from edit_engine.runtime import telemetry
from edit_engine.runtime.config import EngineConfig
from edit_engine.view import RenderView


@dataclass(slots=True)
class EditorSession:
    """Everything a host needs to drive one document."""

    context: ModeContext
    manager: ModeManager
    view: RenderView

    @property
    def store(self) -> TextStore:
        return self.context.store

    @property
    def mode(self) -> str:
        active = self.manager.active_mode
        return active.name if active else ""

    def dispatch(self, name: str, **fields: object) -> ModeResult:
        return self.manager.handle_command(EditCommand(name, **fields))  # type: ignore[arg-type]

    def open(self, path: PathType) -> str:
        return open_file(self.context, path)


def create_editor(
    config: Optional[EngineConfig] = None,
    *,
    registers: Optional[RegisterBank] = None,
    path: Optional[PathType] = None,
) -> EditorSession:
    """Build an editor in edit mode, optionally opening ``path``."""

    config = config or EngineConfig()
    context = ModeContext(
        store=TextStore(config=config),
        history=PositionHistory(config.history_capacity),
        registers=registers or RegisterBank(),
        bus=ModeBus(),
        config=config,
    )
    registry = CommandRegistry(logger_name="edit_engine.commands")
    load_default_commands(registry)

    manager = ModeManager(context, command_registry=registry)
    manager.register_mode(EditMode)
    manager.register_mode(FindMode)
    manager.register_mode(GotoMode)

    session = EditorSession(
        context=context, manager=manager, view=RenderView(context.store, config=config)
    )
    telemetry.record_event(
        "editor.create",
        level="debug",
        data={"capacity": context.store.capacity, "commands": len(registry)},
    )
    if path is not None:
        context.extras["status_message"] = open_file(context, path)
    return session


def open_file(context: ModeContext, path: PathType) -> str:
    """Load ``path`` into the store and return the status message.

    An unreadable path keeps the current content but binds the filename, so
    the first save creates the file.
    """

    store = context.store
    filename = os.fspath(path)
    try:
        store.load(path)
    except FileNotReadable as exc:
        store.filename = filename
        telemetry.record_event(
            "file.new", data={"path": filename, "reason": str(exc.__cause__)}
        )
        context.bus.emit("file.opened", {"path": filename, "created": True})
        return "New file"

    context.history.clear()
    context.bus.emit("file.opened", {"path": filename, "created": False})
    return f"Opened: {filename}"


__all__ = ["EditorSession", "create_editor", "open_file"]
