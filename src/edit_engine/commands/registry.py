"""Command registry mapping command ids to handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from edit_engine.runtime.telemetry import span

from .models import CommandRef


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    groups: tuple[str, ...]


class UnknownCommandError(KeyError):
    """Raised when a command id has no registered handler."""

    def __init__(self, command_id: str) -> None:
        super().__init__(f"Command '{command_id}' is not registered")
        self.command_id = command_id


class CommandRegistry:
    """Owns command references; dispatch happens through ``execute``."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def get(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise UnknownCommandError(command_id) from exc

    def lookup(self, command_id: str) -> Optional[CommandRef]:
        return self._commands.get(command_id)

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ):
            if not replace and command.id in self._commands:
                raise ValueError(f"Command '{command.id}' already registered")
            self._commands[command.id] = command
            self._revision += 1
            return command

    def unregister(self, command_id: str) -> Optional[CommandRef]:
        command = self._commands.pop(command_id, None)
        if command is not None:
            self._revision += 1
        return command

    def iter_commands(self, group: Optional[str] = None) -> Iterator[CommandRef]:
        for command in self._commands.values():
            if group is None or command.group == group:
                yield command

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            groups=tuple(sorted({command.group for command in self._commands.values()})),
        )

    def execute(self, command_id: str, *args: object, **kwargs: object) -> object:
        command = self.get(command_id)
        with span(
            "commands::execute",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id, "telemetry": command.telemetry_name},
        ):
            return command(*args, **kwargs)


__all__ = ["CommandRegistry", "RegistryStats", "UnknownCommandError"]
