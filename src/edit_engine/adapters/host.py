"""Host adapter that wires ModeManager results and bus events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from edit_engine.buffer.errors import PathType
from edit_engine.modes import EditCommand, ModeManager, ModeResult
from edit_engine.modes.edit_mode import require_command_registry
from edit_engine.session import EditorSession, open_file
from edit_engine.view import ViewSnapshot

DEFAULT_VISIBLE_LINES = 40

FORWARDED_EVENTS: tuple[str, ...] = (
    "selection.changed",
    "clipboard.yank",
    "history.jump",
    "file.saved",
    "file.opened",
    "find.start",
    "find.end",
    "find.submit",
    "find.match",
    "goto.start",
    "goto.end",
    "goto.submit",
    "goto.line",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class HostHooks:
    """Callbacks invoked by the adapter to update the host surface."""

    update_view: Callable[[ViewSnapshot], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class EditorAdapter:
    """Bridges an EditorSession to a host that renders and decodes input."""

    def __init__(
        self,
        session: EditorSession,
        hooks: HostHooks,
        *,
        visible_lines: int = DEFAULT_VISIBLE_LINES,
        events: Iterable[str] = FORWARDED_EVENTS,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.first_line = 0
        self.visible_lines = max(1, visible_lines)
        self.status_message = str(session.context.extras.get("status_message", ""))
        self._subscribe_events(events)
        self._refresh_view()

    @property
    def manager(self) -> ModeManager:
        return self.session.manager

    def dispatch(self, command: EditCommand) -> ModeResult:
        """Run ``command`` through the active mode and refresh the host."""

        self._log_state("command ->", name=command.name, text=command.text)
        result = self.manager.handle_command(command)
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def send(self, name: str, **fields: object) -> ModeResult:
        return self.dispatch(EditCommand(name, **fields))  # type: ignore[arg-type]

    def open_file(self, path: PathType) -> str:
        message = open_file(self.session.context, path)
        self.first_line = 0
        self._set_status(message)
        self._refresh_view()
        return message

    def resize(self, visible_lines: int) -> None:
        self.visible_lines = max(1, visible_lines)
        self._scroll_to_cursor()
        self._refresh_view()

    def scroll(self, delta: int) -> None:
        last = max(0, self.session.view.line_count() - 1)
        self.first_line = max(0, min(self.first_line + delta, last))
        self._refresh_view()

    def _after_mode_result(self, result: ModeResult) -> None:
        if result.message is not None:
            self._set_status(result.message)
        self._scroll_to_cursor()
        self._refresh_view()

    def _set_status(self, message: str) -> None:
        self.status_message = message
        self.session.context.extras["status_message"] = message
        self.hooks.update_status(message)

    def _scroll_to_cursor(self) -> None:
        line = self.session.store.line
        if line < self.first_line:
            self.first_line = line
        elif line >= self.first_line + self.visible_lines:
            self.first_line = line - self.visible_lines + 1

    def _subscribe_events(self, events: Iterable[str]) -> None:
        bus = self.session.context.bus
        for event in events:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        snapshot = self.session.view.snapshot(
            self.first_line, self.visible_lines, message=self.status_message
        )
        snapshot.attributes["mode"] = self.session.mode
        self.hooks.update_view(snapshot)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        store = self.session.store
        registry = require_command_registry(self.session.context)
        prompt = self.session.context.extras.get("prompt_state")
        prompt_text: Optional[str] = None
        if isinstance(prompt, dict) and prompt.get("text"):
            prompt_text = str(prompt["text"])
        return {
            "mode": self.session.mode,
            "cursor": store.cursor,
            "position": store.line_col(),
            "selection": store.selection_span(),
            "prompt": prompt_text,
            "modified": store.modified,
            "undo_depth": store.undo_log.boundary,
            "commands_revision": registry.revision(),
        }


__all__ = ["EditorAdapter", "HostHooks", "FORWARDED_EVENTS"]
