"""Viewport scrolling and frame composition."""

from .compositor import Frame, StatusMessage, compose_frame
from .viewport import Viewport

__all__ = ["Frame", "StatusMessage", "Viewport", "compose_frame"]
