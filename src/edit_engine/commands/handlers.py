"""Edit-mode command implementations.

Every handler takes ``(context, command)`` and returns a ``ModeResult``
whose ``message`` is the status line text, when there is one.
"""

from __future__ import annotations

from typing import Callable

from edit_engine import actions
from edit_engine.buffer import FileAccessError, NoFilenameSet, TextStore
from edit_engine.buffer.registers import UNNAMED
from edit_engine.modes.base_mode import EditCommand, ModeContext, ModeResult
from edit_engine.runtime import telemetry

Handler = Callable[[ModeContext, EditCommand], ModeResult]


def _done(message: str | None = None, *, status: str = "ok") -> ModeResult:
    return ModeResult(consumed=True, status=status, message=message)


def _drop_selection(store: TextStore) -> bool:
    """Delete a non-empty selection; an empty one is simply cleared."""

    if store.has_selection():
        store.delete_selection()
        return True
    store.clear_selection()
    return False


def _motion(
    context: ModeContext,
    command: EditCommand,
    motion: actions.Motion,
    *,
    remember: bool = False,
) -> ModeResult:
    if remember:
        context.push_position()
    actions.apply_motion(context.store, motion, extend=command.extend)
    return _done(status="motion")


# -- text entry --------------------------------------------------------------


def insert_char(context: ModeContext, command: EditCommand) -> ModeResult:
    payload = command.payload
    if not payload:
        return ModeResult(consumed=False, status="miss", message=None)
    store = context.store
    _drop_selection(store)
    if len(payload) == 1:
        store.insert_char(payload[0])
    else:
        store.insert_text(payload)
    return _done(status="edit")


def insert_newline(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    _drop_selection(context.store)
    context.store.insert_char(b"\n")
    return _done(status="edit")


def insert_tab(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    _drop_selection(context.store)
    context.store.insert_text(b" " * context.config.tab_width)
    return _done(status="edit")


def delete_backward(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    if not _drop_selection(context.store):
        context.store.delete_backward()
    return _done(status="edit")


def delete_forward(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    if not _drop_selection(context.store):
        context.store.delete_forward()
    return _done(status="edit")


def delete_word_backward(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    if not _drop_selection(context.store):
        actions.delete_word_backward(context.store)
    return _done(status="edit")


def delete_word_forward(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    if not _drop_selection(context.store):
        actions.delete_word_forward(context.store)
    return _done(status="edit")


# -- cursor ------------------------------------------------------------------


def move_by(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, lambda store: store.move_cursor_by(command.delta))


def move_to(context: ModeContext, command: EditCommand) -> ModeResult:
    if command.position is None:
        return ModeResult(consumed=False, status="miss", message=None)
    position = command.position
    return _motion(context, command, lambda store: store.move_cursor_to(position))


def move_line(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, lambda store: store.move_line(command.delta))


def line_start(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, TextStore.move_to_line_start)


def line_end(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, TextStore.move_to_line_end)


def document_start(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, actions.move_to_document_start, remember=True)


def document_end(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, actions.move_to_document_end, remember=True)


def word_left(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, actions.move_word_left)


def word_right(context: ModeContext, command: EditCommand) -> ModeResult:
    return _motion(context, command, actions.move_word_right)


# -- selection ---------------------------------------------------------------


def select_word(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    span = actions.select_word(context.store)
    if span is not None:
        context.bus.emit("selection.changed", span)
    return _done(status="select")


def select_line(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.bus.emit("selection.changed", actions.select_line(context.store))
    return _done(status="select")


def select_all(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.bus.emit("selection.changed", actions.select_all(context.store))
    return _done("Selected all", status="select")


def clear_selection(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    return _done(status="select")


# -- clipboard ---------------------------------------------------------------


def _yank(context: ModeContext, *, cut: bool) -> ModeResult:
    store = context.store
    if not store.has_selection():
        return _done(status="no_selection")
    text = store.get_selection_text()
    context.registers.yank_to(UNNAMED, text)
    context.bus.emit("clipboard.yank", {"bytes": len(text), "cut": cut})
    if cut:
        store.delete_selection()
        return _done("Cut", status="clipboard")
    return _done("Copied", status="clipboard")


def cut(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    return _yank(context, cut=True)


def copy(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    return _yank(context, cut=False)


def paste(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    value = context.registers.paste_from(UNNAMED)
    if not value:
        return _done(status="empty_register")
    actions.replace_selection(context.store, value.data)
    return _done("Pasted", status="clipboard")


# -- history -----------------------------------------------------------------


def undo(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    context.store.undo()
    return _done("Undo", status="history")


def redo(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    context.store.redo()
    return _done("Redo", status="history")


# -- prompts -----------------------------------------------------------------


def start_find(context: ModeContext, command: EditCommand) -> ModeResult:
    del context, command
    return ModeResult(consumed=True, switch_to="find", status="prompt", message="Find: ")


def start_goto(context: ModeContext, command: EditCommand) -> ModeResult:
    del context, command
    return ModeResult(
        consumed=True, switch_to="goto", status="prompt", message="Goto line: "
    )


# -- lines -------------------------------------------------------------------


def duplicate_line(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    actions.duplicate_line(context.store)
    return _done(status="edit")


def delete_line(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    actions.delete_line(context.store)
    return _done(status="edit")


def move_line_up(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    actions.move_line_up(context.store)
    return _done(status="edit")


def move_line_down(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    context.store.clear_selection()
    actions.move_line_down(context.store)
    return _done(status="edit")


# -- jumps -------------------------------------------------------------------


def _jump(context: ModeContext, target: int, direction: str) -> ModeResult:
    store = context.store
    origin = store.cursor
    store.clear_selection()
    store.move_cursor_to(target)
    telemetry.record_event(
        "history.jump",
        level="debug",
        data={"direction": direction, "from": origin, "to": store.cursor},
    )
    context.bus.emit("history.jump", {"direction": direction, "to": store.cursor})
    return _done(status="jump")


def jump_back(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    if not context.history.can_go_back():
        return _done(status="no_history")
    return _jump(context, context.history.back(context.store.cursor), "back")


def jump_forward(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    if not context.history.can_go_forward():
        return _done(status="no_history")
    target = context.history.forward()
    assert target is not None
    return _jump(context, target, "forward")


# -- files -------------------------------------------------------------------


def save(context: ModeContext, command: EditCommand) -> ModeResult:
    del command
    try:
        context.store.save()
    except NoFilenameSet:
        telemetry.record_event("file.save_skipped", level="warning")
        return _done("Error: Could not save file", status="error")
    except FileAccessError as exc:
        telemetry.record_event(
            "file.save_failed",
            level="error",
            data={"path": exc.path, "reason": str(exc.__cause__)},
        )
        return _done("Error: Could not save file", status="error")
    context.bus.emit("file.saved", context.store.filename)
    return _done("Saved", status="file")


__all__ = [
    "Handler",
    "insert_char",
    "insert_newline",
    "insert_tab",
    "delete_backward",
    "delete_forward",
    "delete_word_backward",
    "delete_word_forward",
    "move_by",
    "move_to",
    "move_line",
    "line_start",
    "line_end",
    "document_start",
    "document_end",
    "word_left",
    "word_right",
    "select_word",
    "select_line",
    "select_all",
    "clear_selection",
    "cut",
    "copy",
    "paste",
    "undo",
    "redo",
    "start_find",
    "start_goto",
    "duplicate_line",
    "delete_line",
    "move_line_up",
    "move_line_down",
    "jump_back",
    "jump_forward",
    "save",
]
