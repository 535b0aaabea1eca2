"""Row store: the ordered, mutable list of lines behind a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from rowedit.config import TAB_STOP

from .line import Line

ENCODING = "latin-1"


@dataclass(slots=True)
class Document:
    """Lines in on-disk order plus the count of unsaved mutations.

    Out-of-range line indices make an operation a no-op; out-of-range
    columns are clamped. ``dirty`` is bumped once per applied mutation.
    """

    _lines: List[Line] = field(default_factory=list)
    dirty: int = 0
    filename: Optional[str] = None
    tab_stop: int = TAB_STOP

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], *, tab_stop: int = TAB_STOP
    ) -> "Document":
        document = cls(tab_stop=tab_stop)
        for text in lines:
            document.insert_line(document.line_count, text)
        document.dirty = 0
        return document

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> Line:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        if 0 <= index < len(self._lines):
            return len(self._lines[index])
        return 0

    def snapshot(self) -> Sequence[str]:
        """Return the line contents without exposing the lines themselves."""

        return tuple(line.content for line in self._lines)

    def insert_line(self, at: int, text: str) -> None:
        if at < 0 or at > len(self._lines):
            return
        self._lines.insert(at, Line(text, tab_stop=self.tab_stop))
        self.dirty += 1

    def delete_line(self, at: int) -> None:
        if at < 0 or at >= len(self._lines):
            return
        del self._lines[at]
        self.dirty += 1

    def append_text(self, at: int, text: str) -> None:
        if at < 0 or at >= len(self._lines):
            return
        line = self._lines[at]
        line.content = line.content + text
        self.dirty += 1

    def insert_char(self, at: int, col: int, char: str) -> None:
        if at < 0 or at >= len(self._lines):
            return
        line = self._lines[at]
        col = min(max(col, 0), len(line))
        line.content = line.content[:col] + char + line.content[col:]
        self.dirty += 1

    def delete_char(self, at: int, col: int) -> None:
        if at < 0 or at >= len(self._lines):
            return
        line = self._lines[at]
        if not len(line):
            return
        col = min(max(col, 0), len(line) - 1)
        line.content = line.content[:col] + line.content[col + 1 :]
        self.dirty += 1

    def truncate_line(self, at: int, col: int) -> None:
        if at < 0 or at >= len(self._lines):
            return
        line = self._lines[at]
        line.content = line.content[: min(max(col, 0), len(line))]
        self.dirty += 1

    def serialize(self) -> bytes:
        """Every line followed by a newline, the last one included."""

        return "".join(f"{line.content}\n" for line in self._lines).encode(ENCODING)


__all__ = ["Document", "ENCODING"]
