"""Built-in bindings for the edit and prompt modes."""

from __future__ import annotations

from typing import Iterable, Sequence

from rowedit.actions import core as core_actions
from rowedit.actions import file as file_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="core.move_up", handler=core_actions.move_up),
    ActionRef(id="core.move_down", handler=core_actions.move_down),
    ActionRef(id="core.move_left", handler=core_actions.move_left),
    ActionRef(id="core.move_right", handler=core_actions.move_right),
    ActionRef(id="core.move_home", handler=core_actions.move_home),
    ActionRef(id="core.move_end", handler=core_actions.move_end),
    ActionRef(id="core.page_up", handler=core_actions.page_up),
    ActionRef(id="core.page_down", handler=core_actions.page_down),
    ActionRef(
        id="core.insert_newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="core.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="core.delete_forward",
        handler=core_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(id="core.noop", handler=core_actions.noop_action),
    ActionRef(
        id="file.save",
        handler=file_actions.save_buffer,
        description="Save the buffer, prompting for a name if needed",
    ),
    ActionRef(
        id="file.quit",
        handler=file_actions.quit_editor,
        description="Quit, confirming when there are unsaved changes",
    ),
    ActionRef(id="prompt.submit", handler=file_actions.submit_prompt),
    ActionRef(id="prompt.cancel", handler=file_actions.cancel_prompt),
    ActionRef(id="prompt.erase", handler=file_actions.erase_prompt),
)

_EDIT_KEYS: tuple[tuple[str, str], ...] = (
    ("UP", "core.move_up"),
    ("DOWN", "core.move_down"),
    ("LEFT", "core.move_left"),
    ("RIGHT", "core.move_right"),
    ("HOME", "core.move_home"),
    ("END", "core.move_end"),
    ("PAGEUP", "core.page_up"),
    ("PAGEDOWN", "core.page_down"),
    ("ENTER", "core.insert_newline"),
    ("BACKSPACE", "core.delete_backward"),
    ("CTRL+H", "core.delete_backward"),
    ("DELETE", "core.delete_forward"),
    ("CTRL+S", "file.save"),
    ("CTRL+X", "file.quit"),
    ("CTRL+L", "core.noop"),
    ("ESC", "core.noop"),
)

_PROMPT_KEYS: tuple[tuple[str, str], ...] = (
    ("ENTER", "prompt.submit"),
    ("ESC", "prompt.cancel"),
    ("BACKSPACE", "prompt.erase"),
    ("CTRL+H", "prompt.erase"),
    ("DELETE", "prompt.erase"),
)


def _bindings(mode: str, keys: Iterable[tuple[str, str]]) -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=f"{mode}.{key.lower()}",
            mode=mode,
            sequence=KeySequence.from_strings(key),
            action_id=action_id,
        )
        for key, action_id in keys
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = _bindings("edit", _EDIT_KEYS) + _bindings(
    "prompt", _PROMPT_KEYS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
]
