"""Textual host. ``app`` needs the ``textual`` package; ``controller`` does not."""

from .controller import BUS_EVENTS, TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "BUS_EVENTS"]
