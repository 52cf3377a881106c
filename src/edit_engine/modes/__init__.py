"""Mode manager and the edit, find and goto modes."""

from .base_mode import EditCommand, Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import FindMode, GotoMode, PromptMode
from .mode_manager import ModeManager

__all__ = [
    "EditCommand",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "EditMode",
    "PromptMode",
    "FindMode",
    "GotoMode",
    "ModeManager",
]
