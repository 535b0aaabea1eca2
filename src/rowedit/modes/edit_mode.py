"""Edit mode: bound keys run actions, printable keys type into the buffer."""

from __future__ import annotations

from typing import List

from rowedit.buffer import is_insertable
from rowedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver

QUIT_STATUSES = frozenset({"quit", "quit_refused"})


class EditMode(Mode):
    name = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("rowedit.modes.edit")
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._dispatch(key)
        # Only consecutive quit presses count towards leaving a dirty buffer.
        if result.status not in QUIT_STATUSES:
            self.context.quit_guard.reset()
        return result

    def _dispatch(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        resolution = self._resolver.resolve(self.name, tuple(self._pending))

        if resolution.status == "match" and resolution.match:
            self._pending.clear()
            return execute_match(self.context, resolution.match)

        if resolution.status == "pending":
            return ModeResult(consumed=True, status="pending")

        self._pending.clear()
        text = key.text
        if text is not None and not key.modifiers and is_insertable(text):
            self.context.buffer.insert_char(text)
            return ModeResult(consumed=True, status="insert")

        return ModeResult(consumed=False, status="ignored")
