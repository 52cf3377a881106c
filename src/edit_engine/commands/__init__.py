"""Abstract edit command registry and the default command set."""

from .models import CommandRef
from .registry import CommandRegistry, RegistryStats, UnknownCommandError
from .defaults import DEFAULT_COMMANDS, load_default_commands

__all__ = [
    "CommandRef",
    "CommandRegistry",
    "RegistryStats",
    "UnknownCommandError",
    "DEFAULT_COMMANDS",
    "load_default_commands",
]
