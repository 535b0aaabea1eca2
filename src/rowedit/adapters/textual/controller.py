"""Host-neutral bridge between Textual key presses and the mode manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from rowedit.modes import KeyInput, ModeResult
from rowedit.modes.mode_manager import ModeManager
from rowedit.view import Frame, compose_frame


def _noop(*_args, **_kwargs) -> None:
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to repaint and notify the host."""

    update_screen: Callable[[Frame], None]
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


BUS_EVENTS = ("editor.quit", "editor.saved", "prompt.start", "prompt.end")


class TextualEditorAdapter:
    """Feeds key presses into the manager and pushes a frame after each one."""

    def __init__(
        self,
        manager: ModeManager,
        hooks: TextualUIHooks,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.manager = manager
        self.hooks = hooks
        self._clock = clock
        for event in BUS_EVENTS:
            manager.context.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        normalized = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized)
        )
        self._log_state("result <-", status=result.status, switch_to=result.switch_to)
        self.refresh()
        return result

    def refresh(self) -> Frame:
        context = self.manager.context
        frame = compose_frame(
            context.buffer,
            context.viewport,
            context.status,
            context.config,
            now=self._clock() if self._clock else None,
        )
        self.hooks.update_screen(frame)
        return frame

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.manager.context
        active_mode = self.manager.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "cursor": context.buffer.cursor,
            "dirty": context.buffer.dirty,
            "offset": (context.viewport.row_offset, context.viewport.col_offset),
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "BUS_EVENTS"]
