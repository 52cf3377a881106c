"""Default editing mode: every command is looked up in the command registry."""

from __future__ import annotations

from edit_engine.commands.registry import CommandRegistry
from edit_engine.runtime import telemetry

from .base_mode import EditCommand, Mode, ModeContext, ModeResult


def require_command_registry(context: ModeContext) -> CommandRegistry:
    registry = context.extras.get("command_registry")
    if not isinstance(registry, CommandRegistry):
        raise RuntimeError("ModeContext is missing a command registry")
    return registry


class EditMode(Mode):
    name = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("edit_engine.modes.edit")
        self._registry = require_command_registry(context)

    def handle_command(self, command: EditCommand) -> ModeResult:
        if self._registry.lookup(command.name) is None:
            return ModeResult(consumed=False, status="miss", message="unhandled")

        outcome = self._registry.execute(command.name, self.context, command)
        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["EditMode", "require_command_registry"]
