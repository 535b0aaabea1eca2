"""Loading and saving a Document as plain text."""

from __future__ import annotations

import os
from typing import Optional

from rowedit.runtime import telemetry

from .document import ENCODING, Document

FILE_MODE = 0o644


class PersistenceError(OSError):
    """Base for every load/save failure; carries the offending path."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class FileOpenFailure(PersistenceError):
    """The file could not be opened (or read on load)."""


class FileTruncateFailure(PersistenceError):
    """The file opened but could not be truncated to the new size."""


class FileWriteFailure(PersistenceError):
    """The write failed or was short."""


def split_lines(data: bytes) -> list[str]:
    """Split raw file data into lines without their terminators."""

    if not data:
        return []
    text = data.decode(ENCODING)
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [piece.rstrip("\r\n") for piece in pieces]


def load(document: Document, path: str) -> Document:
    """Append the lines of ``path`` to ``document`` and mark it clean."""

    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        telemetry.record_event(
            "persistence.load_failed",
            level="error",
            data={"path": path, "error": exc.strerror or str(exc)},
        )
        raise FileOpenFailure(exc.strerror or str(exc), path=path) from exc

    with telemetry.span(
        "persistence::load", component="persistence", metadata={"path": path}
    ) as handle:
        lines = split_lines(data)
        for text in lines:
            document.insert_line(document.line_count, text)
        handle.add_metadata("lines", len(lines))

    document.filename = path
    document.dirty = 0
    return document


def save(document: Document, path: Optional[str] = None) -> int:
    """Write ``document`` to ``path`` (default: its filename).

    Returns the number of bytes written. ``dirty`` is only reset once the
    whole payload is on disk.
    """

    target = path or document.filename
    if not target:
        raise FileOpenFailure("no file name", path="")

    payload = document.serialize()
    with telemetry.span(
        "persistence::save",
        component="persistence",
        metadata={"path": target, "bytes": len(payload)},
    ):
        try:
            fd = os.open(target, os.O_RDWR | os.O_CREAT, FILE_MODE)
        except OSError as exc:
            raise FileOpenFailure(exc.strerror or str(exc), path=target) from exc

        try:
            try:
                os.ftruncate(fd, len(payload))
            except OSError as exc:
                raise FileTruncateFailure(
                    exc.strerror or str(exc), path=target
                ) from exc
            try:
                written = os.write(fd, payload)
            except OSError as exc:
                raise FileWriteFailure(exc.strerror or str(exc), path=target) from exc
            if written != len(payload):
                raise FileWriteFailure(
                    f"short write ({written} of {len(payload)} bytes)", path=target
                )
        finally:
            os.close(fd)

    document.filename = target
    document.dirty = 0
    telemetry.record_event(
        "persistence.saved", data={"path": target, "bytes": len(payload)}
    )
    return len(payload)


__all__ = [
    "PersistenceError",
    "FileOpenFailure",
    "FileTruncateFailure",
    "FileWriteFailure",
    "split_lines",
    "load",
    "save",
]
