"""Editing engine: a Document plus its cursor and the operations on both."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Literal, Optional, Sequence

from rowedit.config import TAB_STOP
from rowedit.runtime import telemetry

from . import persistence
from .document import Document
from .state import BufferState, Cursor
from .validation import clamp_cursor

Direction = Literal["up", "down", "left", "right"]

UNTITLED = "[No Name]"


@dataclass(slots=True)
class BufferView:
    lines: tuple[str, ...]
    cursor: Cursor
    dirty: int
    filename: Optional[str]


class Buffer:
    def __init__(
        self,
        *,
        document: Optional[Document] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.document = document if document is not None else Document()
        self.state = state or BufferState()

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        *,
        cursor: Cursor = (0, 0),
        tab_stop: int = TAB_STOP,
    ) -> "Buffer":
        buffer = cls(document=Document.from_lines(lines, tab_stop=tab_stop))
        buffer.state.set_cursor(*clamp_cursor(buffer.document, cursor))
        return buffer

    @classmethod
    def open(cls, path: str, *, tab_stop: int = TAB_STOP) -> "Buffer":
        document = persistence.load(Document(tab_stop=tab_stop), path)
        return cls(document=document)

    @property
    def name(self) -> str:
        return self.document.filename or UNTITLED

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def dirty(self) -> int:
        return self.document.dirty

    def snapshot(self) -> BufferView:
        return BufferView(
            lines=tuple(self.document.snapshot()),
            cursor=self.state.cursor,
            dirty=self.document.dirty,
            filename=self.document.filename,
        )

    def render_column(self) -> int:
        row, col = self.state.cursor
        if row >= self.document.line_count:
            return 0
        return self.document.get_line(row).render_column(col)

    # -- edits -----------------------------------------------------------

    def insert_char(self, char: str) -> None:
        with Transaction(self, "insert_char"):
            row, col = self.state.cursor
            if row == self.document.line_count:
                self.document.insert_line(row, "")
            self.document.insert_char(row, col, char)
            self.state.set_cursor(row, col + 1)

    def insert_newline(self) -> None:
        with Transaction(self, "insert_newline"):
            row, col = self.state.cursor
            if col == 0:
                self.document.insert_line(row, "")
            else:
                tail = self.document.get_line(row).content[col:]
                self.document.insert_line(row + 1, tail)
                self.document.truncate_line(row, col)
            self.state.set_cursor(row + 1, 0)

    def delete_backward(self) -> None:
        row, col = self.state.cursor
        if row >= self.document.line_count or (row, col) == (0, 0):
            return
        with Transaction(self, "delete_backward"):
            if col > 0:
                self.document.delete_char(row, col - 1)
                self.state.set_cursor(row, col - 1)
            else:
                previous_length = self.document.line_length(row - 1)
                content = self.document.get_line(row).content
                self.document.append_text(row - 1, content)
                self.document.delete_line(row)
                self.state.set_cursor(row - 1, previous_length)

    def delete_forward(self) -> None:
        before = self.state.cursor
        self.move("right")
        if self.state.row >= self.document.line_count:
            # Nothing under the cursor at the end of the last line.
            self.state.set_cursor(*before)
            return
        self.delete_backward()

    # -- cursor movement ---------------------------------------------------

    def move(self, direction: Direction) -> None:
        row, col = self.state.cursor
        line_count = self.document.line_count
        if direction == "up":
            if row > 0:
                row -= 1
        elif direction == "down":
            if row < line_count:
                row += 1
        elif direction == "left":
            if col > 0:
                col -= 1
            elif row > 0:
                row -= 1
                col = self.document.line_length(row)
        elif direction == "right":
            if row < line_count:
                if col < self.document.line_length(row):
                    col += 1
                else:
                    row += 1
                    col = 0
        else:
            raise ValueError(f"Unknown direction '{direction}'")
        self.state.set_cursor(*clamp_cursor(self.document, (row, col)))

    def move_home(self) -> None:
        self.state.set_cursor(self.state.row, 0)

    def move_end(self) -> None:
        row = self.state.row
        self.state.set_cursor(row, self.document.line_length(row))

    def page(self, direction: Literal["up", "down"], *, top: int, height: int) -> None:
        """Jump to the window edge, then move a full window further."""

        if direction == "up":
            row = top
        else:
            row = min(top + height - 1, self.document.line_count)
        self.state.set_cursor(*clamp_cursor(self.document, (row, self.state.col)))
        for _ in range(height):
            self.move(direction)

    # -- persistence ---------------------------------------------------------

    def save(self, path: Optional[str] = None) -> int:
        return persistence.save(self.document, path)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit in a telemetry span and records its dirty delta."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._dirty_before = 0

    def __enter__(self) -> "Transaction":
        self._dirty_before = self.buffer.document.dirty
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "cursor": self.buffer.cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.state.last_change_tick = self.buffer.document.dirty
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferView", "Transaction", "Direction", "UNTITLED"]
