"""Single-line prompt modes for incremental find and goto-line."""

from __future__ import annotations

from typing import List, MutableMapping, Optional, cast

from edit_engine import actions
from edit_engine.runtime import telemetry

from .base_mode import EditCommand, Mode, ModeContext, ModeResult

MAX_PROMPT_LENGTH = 255

_CANCEL = {"select.clear", "prompt.cancel"}
_SUBMIT = {"edit.insert_newline", "prompt.submit"}


class PromptMode(Mode):
    """Collects typed characters until Enter submits or Escape cancels."""

    name = "prompt"
    prompt = ""
    return_to = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"edit_engine.modes.{self.name}")
        self._typed: List[str] = []

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._typed.clear()
        self.context.bus.emit(f"{self.name}.start", None)
        self._sync_prompt_state()

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self.context.bus.emit(f"{self.name}.end", self.current_text)
        self._typed.clear()
        self._sync_prompt_state()

    @property
    def current_text(self) -> str:
        return "".join(self._typed)

    @property
    def prompt_line(self) -> str:
        return f"{self.prompt}{self.current_text}"

    def accepts(self, char: str) -> bool:
        return char.isprintable()

    def submit(self, text: str) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def handle_command(self, command: EditCommand) -> ModeResult:
        if command.name in _CANCEL:
            self._typed.clear()
            self._sync_prompt_state()
            return ModeResult(
                consumed=True, switch_to=self.return_to, status="prompt_cancel", message=""
            )

        if command.name in _SUBMIT:
            text = self.current_text
            self.context.bus.emit(f"{self.name}.submit", text)
            return self.submit(text)

        if command.name == "edit.delete_backward":
            if not self._typed:
                return ModeResult(consumed=True, status="editing")
            self._typed.pop()
            self._sync_prompt_state()
            return ModeResult(consumed=True, status="editing", message=self.prompt_line)

        if command.name == "edit.insert_char":
            return self._type(command)

        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _type(self, command: EditCommand) -> ModeResult:
        text = command.text
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8", errors="replace")
        accepted = False
        for char in text or "":
            if len(self._typed) >= MAX_PROMPT_LENGTH or not self.accepts(char):
                continue
            self._typed.append(char)
            accepted = True
        if not accepted:
            return ModeResult(consumed=True, status="ignored")
        self._sync_prompt_state()
        return ModeResult(consumed=True, status="editing", message=self.prompt_line)

    def _prompt_state(self) -> MutableMapping[str, object]:
        return cast(
            MutableMapping[str, object],
            self.context.extras.setdefault("prompt_state", {}),
        )

    def _sync_prompt_state(self) -> None:
        state = self._prompt_state()
        state["mode"] = self.name
        state["text"] = self.current_text


class FindMode(PromptMode):
    """Enter selects the next match after the cursor, wrapping to the top."""

    name = "find"
    prompt = "Find: "

    def submit(self, text: str) -> ModeResult:
        store = self.context.store
        needle = text.encode("utf-8")
        found = actions.find_wrapping(store, needle)
        if found is None:
            return ModeResult(consumed=True, status="not_found", message="Not found")

        self.context.push_position()
        store.clear_selection()
        store.move_cursor_to(found)
        store.start_selection()
        store.move_cursor_by(len(needle))
        store.update_selection()
        self.context.bus.emit("find.match", {"offset": found, "length": len(needle)})
        return ModeResult(
            consumed=True, status="found", message="Found. Enter: next, Esc: done"
        )


class GotoMode(PromptMode):
    """Accepts decimal digits only; Enter jumps and returns to editing."""

    name = "goto"
    prompt = "Goto line: "

    def accepts(self, char: str) -> bool:
        return "0" <= char <= "9"

    def submit(self, text: str) -> ModeResult:
        line = int(text) if text else 0
        if line <= 0:
            return ModeResult(consumed=True, switch_to=self.return_to, status="prompt_submit")

        self.context.push_position()
        self.context.store.clear_selection()
        actions.goto_line(self.context.store, line)
        self.context.bus.emit("goto.line", line)
        return ModeResult(
            consumed=True,
            switch_to=self.return_to,
            status="prompt_submit",
            message=f"Jumped to line {line}",
        )


__all__ = ["MAX_PROMPT_LENGTH", "PromptMode", "FindMode", "GotoMode"]
