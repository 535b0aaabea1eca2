"""Cursor clamping shared by the editing operations."""

from __future__ import annotations

from .document import Document
from .state import Cursor


def clamp_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside the document.

    The row may sit one past the last line; the column is bounded by the
    length of the row it lands on (zero past the last line).
    """

    row, col = cursor
    row = min(max(row, 0), document.line_count)
    col = min(max(col, 0), document.line_length(row))
    return (row, col)
