"""Editing verbs reachable from key bindings."""

from .core import (
    delete_backward,
    delete_forward,
    insert_newline,
    move_down,
    move_end,
    move_home,
    move_left,
    move_right,
    move_up,
    noop_action,
    page_down,
    page_up,
)
from .file import (
    cancel_prompt,
    erase_prompt,
    quit_editor,
    save_buffer,
    submit_prompt,
    write_buffer,
)

__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
    "insert_newline",
    "delete_backward",
    "delete_forward",
    "noop_action",
    "save_buffer",
    "write_buffer",
    "quit_editor",
    "submit_prompt",
    "cancel_prompt",
    "erase_prompt",
]
