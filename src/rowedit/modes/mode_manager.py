"""Mode manager: owns the active mode and runs one input cycle per key."""

from __future__ import annotations

from typing import Dict, Optional, Type

from rowedit.buffer import Buffer
from rowedit.config import EditorConfig
from rowedit.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from rowedit.runtime import telemetry
from rowedit.view import Viewport

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import PromptMode


class ModeManager:
    """Dispatches key events to the active mode, then rescrolls the viewport."""

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("rowedit.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="rowedit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(self.keymap_registry)
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        self.context.viewport.scroll(self.context.buffer)
        return result


def create_default_manager(
    buffer: Buffer,
    *,
    rows: int,
    cols: int,
    config: EditorConfig | None = None,
    bus: ModeBus | None = None,
) -> ModeManager:
    """Build a manager with edit and prompt modes and the default keymaps."""

    context = ModeContext(
        buffer=buffer,
        viewport=Viewport(rows=rows, cols=cols),
        bus=bus or ModeBus(),
        config=config or EditorConfig(),
    )
    manager = ModeManager(context)
    manager.register_mode(EditMode)
    manager.register_mode(PromptMode)
    context.status.set(context.config.help_message)
    context.viewport.scroll(buffer)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
