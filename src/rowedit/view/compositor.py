"""Turns editor state into the text of one screen frame."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from rowedit import __version__
from rowedit.buffer import Buffer
from rowedit.config import EditorConfig

from .viewport import Viewport

FILLER = "~"
NAME_WIDTH = 20


@dataclass(slots=True)
class StatusMessage:
    """Transient message line; ``set_at`` is a ``time.monotonic`` stamp."""

    text: str = ""
    set_at: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    def set(self, text: str) -> None:
        self.text = text
        self.set_at = self.clock()

    def clear(self) -> None:
        self.set("")

    def visible(self, timeout: float, now: Optional[float] = None) -> str:
        current = self.clock() if now is None else now
        if self.text and current - self.set_at < timeout:
            return self.text
        return ""


@dataclass(frozen=True, slots=True)
class Frame:
    rows: tuple[str, ...]
    status_bar: str
    message: str
    cursor: tuple[int, int]


def welcome_banner(cols: int) -> str:
    banner = f"rowedit editor -- version {__version__}"[:cols]
    padding = (cols - len(banner)) // 2
    if not padding:
        return banner
    return FILLER + " " * (padding - 1) + banner


def status_bar(buffer: Buffer, cols: int) -> str:
    line_count = buffer.document.line_count
    modified = "(modified)" if buffer.dirty else ""
    left = f"{buffer.name[:NAME_WIDTH]} - {line_count} lines {modified}"[:cols]
    right = f"{buffer.state.row + 1}/{line_count}"
    gap = cols - len(left) - len(right)
    if gap < 0:
        return left.ljust(cols)
    return left + " " * gap + right


def compose_frame(
    buffer: Buffer,
    viewport: Viewport,
    status: StatusMessage,
    config: EditorConfig,
    *,
    now: Optional[float] = None,
) -> Frame:
    """Build the frame for the current state; expects a scrolled viewport."""

    document = buffer.document
    rows: list[str] = []
    for y, text in enumerate(viewport.visible_lines(document)):
        if text is not None:
            rows.append(text)
        elif document.line_count == 0 and y == viewport.rows // 3:
            rows.append(welcome_banner(viewport.cols))
        else:
            rows.append(FILLER)

    return Frame(
        rows=tuple(rows),
        status_bar=status_bar(buffer, viewport.cols),
        message=status.visible(config.status_timeout, now)[: viewport.cols],
        cursor=viewport.screen_position(buffer),
    )


__all__ = ["Frame", "StatusMessage", "compose_frame", "status_bar", "welcome_banner"]
