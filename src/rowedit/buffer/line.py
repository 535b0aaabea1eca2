"""A single line of text and its cached render form."""

from __future__ import annotations

from typing import Optional

from rowedit.config import TAB_STOP

from .render import column_to_render_column, expand_tabs


class Line:
    """Line content without its terminator.

    ``render`` is rebuilt on first read after the content changes, so it can
    never be observed out of date.
    """

    __slots__ = ("_content", "_render", "tab_stop")

    def __init__(self, content: str = "", *, tab_stop: int = TAB_STOP) -> None:
        self._content = content
        self._render: Optional[str] = None
        self.tab_stop = tab_stop

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self._content = value
        self._render = None

    @property
    def render(self) -> str:
        if self._render is None:
            self._render = expand_tabs(self._content, self.tab_stop)
        return self._render

    @property
    def is_rendered(self) -> bool:
        return self._render is not None

    def render_column(self, col: int) -> int:
        return column_to_render_column(self._content, col, self.tab_stop)

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"Line({self._content!r})"
