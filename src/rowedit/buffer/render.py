"""Tab expansion shared by line rendering and cursor placement."""

from __future__ import annotations

from rowedit.config import TAB_STOP


def _advance(rx: int, char: str, tab_stop: int) -> int:
    if char == "\t":
        return rx + tab_stop - (rx % tab_stop)
    return rx + 1


def expand_tabs(content: str, tab_stop: int = TAB_STOP) -> str:
    """Return ``content`` with each tab padded out to the next tab stop."""

    if "\t" not in content:
        return content
    parts: list[str] = []
    rx = 0
    for char in content:
        next_rx = _advance(rx, char, tab_stop)
        parts.append(" " * (next_rx - rx) if char == "\t" else char)
        rx = next_rx
    return "".join(parts)


def column_to_render_column(content: str, col: int, tab_stop: int = TAB_STOP) -> int:
    """Display column of character index ``col`` within ``content``.

    ``col`` is clamped to ``[0, len(content)]``.
    """

    rx = 0
    for char in content[: max(col, 0)]:
        rx = _advance(rx, char, tab_stop)
    return rx


def is_insertable(char: str | None) -> bool:
    """True for a single printable single-byte character or a tab."""

    if not char or len(char) != 1:
        return False
    if char == "\t":
        return True
    code = ord(char)
    return 32 <= code < 256 and code != 127 and not 128 <= code < 160


__all__ = ["expand_tabs", "column_to_render_column", "is_insertable"]
