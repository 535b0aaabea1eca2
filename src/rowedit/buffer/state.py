"""Cursor state tied to a Document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column); column indexes content, not render


@dataclass(slots=True)
class BufferState:
    """Mutable cursor position plus the dirty tick of the last edit."""

    cursor: Cursor = (0, 0)
    last_change_tick: int = 0

    @property
    def row(self) -> int:
        return self.cursor[0]

    @property
    def col(self) -> int:
        return self.cursor[1]

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)
