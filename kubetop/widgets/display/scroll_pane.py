"""ScrollPane - a read-only text pane scrolled by logical line.

Used for container logs and event messages. Long lines wrap; the scroll
offset counts source lines.

CSS Classes: widget-scroll-pane
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from rich.text import Text

from kubetop.widgets._base import BaseWidget


class ScrollPane(BaseWidget):
    """Plain-text pane with line-based scrolling."""

    _default_classes: ClassVar[str] = "widget-scroll-pane"

    def __init__(self, title: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.lines: list[str] = []
        self.line_offset = 0
        if title:
            self.border_title = title

    def set_lines(self, lines: Sequence[str]) -> None:
        """Replace the content, keeping the offset when still in range."""
        self.lines = list(lines)
        self._clamp()
        self._refresh_if_mounted()

    def set_text(self, text: str) -> None:
        self.set_lines(text.split("\n"))

    @property
    def page_size(self) -> int:
        return max(1, self.size.height - 1) if self.is_mounted else 1

    def _clamp(self) -> None:
        self.line_offset = min(max(self.line_offset, 0), max(0, len(self.lines) - 1))

    def _set_line_offset(self, offset: int) -> None:
        self.line_offset = offset
        self._clamp()
        self._refresh_if_mounted()

    def move_up(self) -> None:
        self._set_line_offset(self.line_offset - 1)

    def move_down(self) -> None:
        self._set_line_offset(self.line_offset + 1)

    def move_top(self) -> None:
        self._set_line_offset(0)

    def move_bottom(self) -> None:
        self._set_line_offset(len(self.lines) - 1)

    def move_page_up(self) -> None:
        self._set_line_offset(self.line_offset - self.page_size)

    def move_page_down(self) -> None:
        self._set_line_offset(self.line_offset + self.page_size)

    def move_half_page_up(self) -> None:
        self._set_line_offset(self.line_offset - max(1, self.page_size // 2))

    def move_half_page_down(self) -> None:
        self._set_line_offset(self.line_offset + max(1, self.page_size // 2))

    def visible_text(self) -> str:
        return "\n".join(self.lines[self.line_offset :])

    def render(self) -> Text:
        return Text(self.visible_text())
