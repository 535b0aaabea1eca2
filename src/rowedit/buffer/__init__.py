"""Line buffer, render index, editing engine and persistence."""

from .buffer import Buffer, BufferView, Direction, Transaction
from .document import Document
from .line import Line
from .persistence import (
    FileOpenFailure,
    FileTruncateFailure,
    FileWriteFailure,
    PersistenceError,
)
from .render import column_to_render_column, expand_tabs, is_insertable
from .state import BufferState, Cursor
from .validation import clamp_cursor

__all__ = [
    "Buffer",
    "BufferView",
    "BufferState",
    "Cursor",
    "Direction",
    "Document",
    "Line",
    "Transaction",
    "PersistenceError",
    "FileOpenFailure",
    "FileTruncateFailure",
    "FileWriteFailure",
    "expand_tabs",
    "column_to_render_column",
    "is_insertable",
    "clamp_cursor",
]
