"""Built-in commands that seed the registry with the standard editing set."""

from __future__ import annotations

from typing import Iterable, Sequence

from . import handlers
from .models import CommandRef
from .registry import CommandRegistry

DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(
        id="edit.insert_char",
        handler=handlers.insert_char,
        description="Insert typed text, replacing the selection",
    ),
    CommandRef(
        id="edit.insert_newline",
        handler=handlers.insert_newline,
        description="Insert a line break",
    ),
    CommandRef(
        id="edit.insert_tab",
        handler=handlers.insert_tab,
        description="Insert spaces up to the configured tab width",
    ),
    CommandRef(
        id="edit.delete_forward",
        handler=handlers.delete_forward,
        description="Delete the byte under the cursor or the selection",
    ),
    CommandRef(
        id="edit.delete_backward",
        handler=handlers.delete_backward,
        description="Delete the byte before the cursor or the selection",
    ),
    CommandRef(
        id="edit.delete_word_forward",
        handler=handlers.delete_word_forward,
        description="Delete to the start of the next word",
    ),
    CommandRef(
        id="edit.delete_word_backward",
        handler=handlers.delete_word_backward,
        description="Delete to the start of the previous word",
    ),
    CommandRef(
        id="cursor.move_by",
        handler=handlers.move_by,
        description="Move the cursor by a byte delta",
    ),
    CommandRef(
        id="cursor.move_to",
        handler=handlers.move_to,
        description="Move the cursor to an absolute offset",
    ),
    CommandRef(
        id="cursor.move_line",
        handler=handlers.move_line,
        description="Move the cursor by a line delta",
    ),
    CommandRef(
        id="cursor.line_start",
        handler=handlers.line_start,
        description="Move to the start of the line",
    ),
    CommandRef(
        id="cursor.line_end",
        handler=handlers.line_end,
        description="Move to the end of the line",
    ),
    CommandRef(
        id="cursor.document_start",
        handler=handlers.document_start,
        description="Move to the start of the document",
    ),
    CommandRef(
        id="cursor.document_end",
        handler=handlers.document_end,
        description="Move to the end of the document",
    ),
    CommandRef(
        id="cursor.word_left",
        handler=handlers.word_left,
        description="Move to the previous word start",
    ),
    CommandRef(
        id="cursor.word_right",
        handler=handlers.word_right,
        description="Move to the next word start",
    ),
    CommandRef(
        id="select.word",
        handler=handlers.select_word,
        description="Select the word under the cursor",
    ),
    CommandRef(
        id="select.line",
        handler=handlers.select_line,
        description="Select the current line",
    ),
    CommandRef(
        id="select.all",
        handler=handlers.select_all,
        description="Select the whole document",
    ),
    CommandRef(
        id="select.clear",
        handler=handlers.clear_selection,
        description="Drop the selection",
    ),
    CommandRef(
        id="clipboard.cut",
        handler=handlers.cut,
        description="Cut the selection",
    ),
    CommandRef(
        id="clipboard.copy",
        handler=handlers.copy,
        description="Copy the selection",
    ),
    CommandRef(
        id="clipboard.paste",
        handler=handlers.paste,
        description="Paste over the selection or at the cursor",
    ),
    CommandRef(
        id="history.undo",
        handler=handlers.undo,
        description="Undo the last edit",
    ),
    CommandRef(
        id="history.redo",
        handler=handlers.redo,
        description="Redo the last undone edit",
    ),
    CommandRef(
        id="find.start",
        handler=handlers.start_find,
        description="Open the find prompt",
    ),
    CommandRef(
        id="goto.start",
        handler=handlers.start_goto,
        description="Open the goto-line prompt",
    ),
    CommandRef(
        id="line.duplicate",
        handler=handlers.duplicate_line,
        description="Duplicate the current line",
    ),
    CommandRef(
        id="line.delete",
        handler=handlers.delete_line,
        description="Delete the current line",
    ),
    CommandRef(
        id="line.move_up",
        handler=handlers.move_line_up,
        description="Swap the current line with the one above",
    ),
    CommandRef(
        id="line.move_down",
        handler=handlers.move_line_down,
        description="Swap the current line with the one below",
    ),
    CommandRef(
        id="jump.back",
        handler=handlers.jump_back,
        description="Return to the previous jump position",
    ),
    CommandRef(
        id="jump.forward",
        handler=handlers.jump_forward,
        description="Go forward in the jump history",
    ),
    CommandRef(
        id="file.save",
        handler=handlers.save,
        description="Write the document to its filename",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    extra_commands: Iterable[CommandRef] | None = None,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> None:
    """Register the built-in commands, optionally filtered by id."""

    filters = _build_filters(include, exclude)

    for command in DEFAULT_COMMANDS:
        if not _selected(command.id, filters):
            continue
        registry.register(command, replace=replace)

    if extra_commands:
        for command in extra_commands:
            registry.register(command, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["load_default_commands", "DEFAULT_COMMANDS"]
