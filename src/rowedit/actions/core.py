"""Cursor movement and editing actions bound in edit mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rowedit.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from rowedit.keymaps.resolver import ResolutionMatch


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move("up")
    return ModeResult(consumed=True, status="move")


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move("down")
    return ModeResult(consumed=True, status="move")


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move("left")
    return ModeResult(consumed=True, status="move")


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move("right")
    return ModeResult(consumed=True, status="move")


def move_home(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move_home()
    return ModeResult(consumed=True, status="move")


def move_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move_end()
    return ModeResult(consumed=True, status="move")


def page_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    viewport = context.viewport
    context.buffer.page("up", top=viewport.row_offset, height=viewport.rows)
    return ModeResult(consumed=True, status="move")


def page_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    viewport = context.viewport
    context.buffer.page("down", top=viewport.row_offset, height=viewport.rows)
    return ModeResult(consumed=True, status="move")


def insert_newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.insert_newline()
    return ModeResult(consumed=True, status="edit")


def delete_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.delete_backward()
    return ModeResult(consumed=True, status="edit")


def delete_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.delete_forward()
    return ModeResult(consumed=True, status="edit")


def noop_action(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


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
]
