"""Base classes and shared services for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, MutableMapping, Optional, Tuple, cast

from rowedit.buffer import Buffer
from rowedit.config import EditorConfig
from rowedit.view import StatusMessage, Viewport


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``key`` is either a named key (``UP``, ``ENTER``, ``S`` with modifiers)
    or the printable character itself; ``text`` carries what it would type.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes and hosts exchange signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class QuitGuard:
    """Counts down confirming quit presses while the buffer is dirty."""

    def __init__(self, times: int) -> None:
        self.times = times
        self.remaining = times

    def request(self, dirty: int) -> bool:
        """Return True once quitting may proceed."""

        if dirty and self.remaining > 0:
            self.remaining -= 1
            return False
        return True

    def reset(self) -> None:
        self.remaining = self.times


@dataclass(slots=True)
class ModeContext:
    """Everything a mode or action may touch while handling one key."""

    buffer: Buffer
    viewport: Viewport
    bus: ModeBus = field(default_factory=ModeBus)
    config: EditorConfig = field(default_factory=EditorConfig)
    status: StatusMessage = field(default_factory=StatusMessage)
    extras: Dict[str, object] = field(default_factory=dict)
    quit_guard: QuitGuard = field(init=False)

    def __post_init__(self) -> None:
        self.quit_guard = QuitGuard(self.config.quit_times)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:
        raise NotImplementedError


def mode_state(context: ModeContext, name: str) -> MutableMapping[str, object]:
    """Per-mode scratch state kept in ``context.extras``."""

    return cast(
        MutableMapping[str, object], context.extras.setdefault(f"{name}_state", {})
    )
