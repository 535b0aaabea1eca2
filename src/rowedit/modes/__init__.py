"""Editor modes and their shared context.

Concrete modes live in ``edit_mode``, ``prompt_mode`` and ``mode_manager``;
they depend on the keymaps, whose actions depend on the types exported here.
"""

from .base_mode import (
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    QuitGuard,
    mode_state,
)

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "QuitGuard",
    "mode_state",
]
