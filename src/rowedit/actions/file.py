"""Save, quit and the "Save as" prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rowedit.buffer import PersistenceError
from rowedit.modes.base_mode import ModeContext, ModeResult, mode_state
from rowedit.runtime import telemetry

if TYPE_CHECKING:
    from rowedit.keymaps.resolver import ResolutionMatch

PROMPT_TEMPLATE = "Save as: {}"
QUIT_WARNING = (
    "WARNING!!! File has unsaved changes. Press Ctrl-X {} more times to quit."
)


def save_buffer(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if not context.buffer.document.filename:
        return ModeResult(consumed=True, switch_to="prompt", status="prompt")
    return write_buffer(context)


def write_buffer(context: ModeContext) -> ModeResult:
    """Save to the document's filename and report the outcome."""

    try:
        written = context.buffer.save()
    except PersistenceError as exc:
        context.status.set(f"Can't save! I/O error: {exc}")
        telemetry.record_event(
            "editor.save_failed",
            level="error",
            data={"path": exc.path, "error": str(exc), "kind": type(exc).__name__},
        )
        return ModeResult(consumed=True, status="save_failed", message=str(exc))

    context.status.set(f"{written} bytes written to disk")
    context.bus.emit(
        "editor.saved", {"path": context.buffer.document.filename, "bytes": written}
    )
    return ModeResult(consumed=True, status="saved")


def quit_editor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    guard = context.quit_guard
    if not guard.request(context.buffer.dirty):
        context.status.set(QUIT_WARNING.format(guard.remaining + 1))
        return ModeResult(consumed=True, status="quit_refused")
    context.bus.emit("editor.quit", {"dirty": context.buffer.dirty})
    return ModeResult(consumed=True, status="quit")


def submit_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    state = mode_state(context, "prompt")
    text = str(state.get("text", ""))
    if not text:
        return ModeResult(consumed=True, status="prompt_empty")
    state["text"] = ""
    context.buffer.document.filename = text
    result = write_buffer(context)
    result.switch_to = "edit"
    return result


def cancel_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    mode_state(context, "prompt")["text"] = ""
    context.status.set("Save aborted")
    return ModeResult(consumed=True, switch_to="edit", status="prompt_cancel")


def erase_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    state = mode_state(context, "prompt")
    text = str(state.get("text", ""))[:-1]
    state["text"] = text
    context.status.set(PROMPT_TEMPLATE.format(text))
    return ModeResult(consumed=True, status="editing")


__all__ = [
    "save_buffer",
    "write_buffer",
    "quit_editor",
    "submit_prompt",
    "cancel_prompt",
    "erase_prompt",
    "PROMPT_TEMPLATE",
]
