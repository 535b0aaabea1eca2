"""Scroll controller mapping the cursor onto the visible window."""

from __future__ import annotations

from dataclasses import dataclass

from rowedit.buffer import Buffer, Document


@dataclass(slots=True)
class Viewport:
    """Visible extent plus the scroll offsets carried between frames.

    ``render_col`` is the cursor's display column as of the last ``scroll``.
    """

    rows: int
    cols: int
    row_offset: int = 0
    col_offset: int = 0
    render_col: int = 0

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(
                f"viewport extent must be positive, got {self.rows}x{self.cols}"
            )

    def scroll(self, buffer: Buffer) -> None:
        """Scroll just far enough for the cursor to be inside the window."""

        row = buffer.state.row
        self.render_col = buffer.render_column()

        if row < self.row_offset:
            self.row_offset = row
        if row >= self.row_offset + self.rows:
            self.row_offset = row - self.rows + 1

        if self.render_col < self.col_offset:
            self.col_offset = self.render_col
        if self.render_col >= self.col_offset + self.cols:
            self.col_offset = self.render_col - self.cols + 1

    def contains(self, row: int, render_col: int) -> bool:
        return (
            self.row_offset <= row < self.row_offset + self.rows
            and self.col_offset <= render_col < self.col_offset + self.cols
        )

    def visible_lines(self, document: Document) -> list[str | None]:
        """Render slice for each screen row; ``None`` below the last line."""

        visible: list[str | None] = []
        for y in range(self.rows):
            index = self.row_offset + y
            if index >= document.line_count:
                visible.append(None)
                continue
            render = document.get_line(index).render
            visible.append(render[self.col_offset : self.col_offset + self.cols])
        return visible

    def screen_position(self, buffer: Buffer) -> tuple[int, int]:
        return (
            buffer.state.row - self.row_offset,
            self.render_col - self.col_offset,
        )


__all__ = ["Viewport"]
