"""Single-line prompt used to ask for a file name on first save."""

from __future__ import annotations

from rowedit.actions.file import PROMPT_TEMPLATE

from .base_mode import KeyInput, Mode, ModeContext, ModeResult, mode_state
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class PromptMode(Mode):
    name = "prompt"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    @property
    def current_text(self) -> str:
        return str(mode_state(self.context, self.name).get("text", ""))

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._set_text("")
        self.context.bus.emit("prompt.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit("prompt.end", self.current_text)

    def handle_key(self, key: KeyInput) -> ModeResult:
        resolution = self._resolver.resolve(self.name, (key_to_token(key),))
        if resolution.status == "match" and resolution.match:
            return execute_match(self.context, resolution.match)

        text = key.text
        if not key.modifiers and text and len(text) == 1 and 32 <= ord(text) < 127:
            self._set_text(self.current_text + text)
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="ignored")

    def _set_text(self, text: str) -> None:
        mode_state(self.context, self.name)["text"] = text
        self.context.status.set(PROMPT_TEMPLATE.format(text))
