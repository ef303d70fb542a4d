"""ScrollTable - a cursor-addressable, viewport-clipped table.

The cursor is tracked by the value of a unique column, so a refresh that
reorders or filters rows keeps the cursor on the same entity. When that
entity disappears the numeric position is kept, clamped to the new rows.

CSS Classes: widget-scroll-table
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from rich.style import Style
from rich.text import Text
from textual import events

from kubetop.constants.values import CURSOR_STYLE, HEADER_STYLE
from kubetop.widgets._base import BaseWidget

Row = Sequence[str]


@dataclass(frozen=True)
class ColumnSpec:
    """Column header and width policy.

    A width of 0 hides the column. An elastic column takes whatever the
    other columns leave of the inner width, never less than ``width``.
    """

    header: str
    width: int
    elastic: bool = False


def truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[: width - 1] + "…"


class ScrollTable(BaseWidget):
    """Table widget with identity-preserving cursor and explicit viewport."""

    _default_classes: ClassVar[str] = "widget-scroll-table"

    def __init__(
        self,
        columns: Sequence[ColumnSpec],
        *,
        unique_column: int = 0,
        show_header: bool = True,
        show_cursor: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.columns: list[ColumnSpec] = list(columns)
        self.unique_column = unique_column
        self.show_header = show_header
        self.show_cursor = show_cursor

        self.rows: list[list[str]] = []
        self.selected_row = 0
        self.top_row = 0
        self.selected_identity: str | None = None

        self._viewport_width = 0
        self._viewport_height = 0
        self._header_style = Style.parse(HEADER_STYLE)
        self._cursor_style = Style.parse(CURSOR_STYLE)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def set_viewport(self, width: int, height: int) -> None:
        """Set the inner size and re-anchor the window around the cursor."""
        self._viewport_width = max(0, width)
        self._viewport_height = max(0, height)
        self._calc_pos()
        self._refresh_if_mounted()

    @property
    def visible_rows(self) -> int:
        """Rows that fit under the header."""
        height = self._viewport_height - (1 if self.show_header else 0)
        return max(1, height)

    @property
    def page_size(self) -> int:
        return max(1, self.visible_rows - 1)

    def column_widths(self) -> list[int]:
        """Resolve the elastic column against the current inner width."""
        fixed = sum(col.width for col in self.columns if not col.elastic)
        return [
            max(self._viewport_width - fixed, col.width) if col.elastic else col.width
            for col in self.columns
        ]

    def on_resize(self, event: events.Resize) -> None:
        self.set_viewport(event.size.width, event.size.height)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def set_rows(self, rows: Sequence[Row]) -> None:
        """Replace the rows, relocating the cursor by identity."""
        self.rows = [list(row) for row in rows]
        if self.selected_identity is not None:
            for index, row in enumerate(self.rows):
                if self._identity_of(row) == self.selected_identity:
                    self.selected_row = index
                    break
        self._calc_pos()
        self._refresh_if_mounted()

    def reset_cursor(self) -> None:
        """Forget the tracked identity and move to the first row."""
        self.selected_identity = None
        self.selected_row = 0
        self.top_row = 0
        self._calc_pos()
        self._refresh_if_mounted()

    def selected_values(self) -> list[str]:
        if not self.rows:
            return []
        return list(self.rows[self.selected_row])

    def _identity_of(self, row: Sequence[str]) -> str | None:
        if 0 <= self.unique_column < len(row):
            return row[self.unique_column]
        return None

    def _calc_pos(self) -> None:
        """Clamp the cursor and keep it inside the visible window."""
        if not self.rows:
            self.selected_row = 0
            self.top_row = 0
            self.selected_identity = None
            return

        last = len(self.rows) - 1
        self.selected_row = min(max(self.selected_row, 0), last)
        self.top_row = min(max(self.top_row, 0), last)

        if self.selected_row < self.top_row:
            self.top_row = self.selected_row
        window = self.visible_rows
        if self.selected_row > self.top_row + window - 1:
            self.top_row = self.selected_row - window + 1
        # Never leave empty space under the last row while rows are hidden above.
        self.top_row = min(self.top_row, max(0, len(self.rows) - window))

        self.selected_identity = self._identity_of(self.rows[self.selected_row])

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def _set_cursor(self, row: int) -> None:
        self.selected_row = row
        self._calc_pos()
        self._refresh_if_mounted()

    def select_row(self, row: int) -> None:
        """Move the cursor to ``row`` (clamped), tracking its identity from now on."""
        self._set_cursor(row)

    def move_up(self) -> None:
        self._set_cursor(self.selected_row - 1)

    def move_down(self) -> None:
        self._set_cursor(self.selected_row + 1)

    def move_top(self) -> None:
        self._set_cursor(0)

    def move_bottom(self) -> None:
        self._set_cursor(len(self.rows) - 1)

    def move_half_page_up(self) -> None:
        self._set_cursor(self.selected_row - max(1, self.page_size // 2))

    def move_half_page_down(self) -> None:
        self._set_cursor(self.selected_row + max(1, self.page_size // 2))

    def move_page_up(self) -> None:
        self._set_cursor(self.selected_row - self.page_size)

    def move_page_down(self) -> None:
        self._set_cursor(self.selected_row + self.page_size)

    def select_at(self, y: int) -> bool:
        """Move the cursor to the row drawn at widget line ``y``.

        Returns:
            True if ``y`` addressed a row.
        """
        offset = y - (1 if self.show_header else 0)
        if offset < 0 or offset >= self.visible_rows:
            return False
        row = self.top_row + offset
        if row >= len(self.rows):
            return False
        self._set_cursor(row)
        return True

    def on_click(self, event: events.Click) -> None:
        self.select_at(event.y)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_cells(self, cells: Sequence[str], widths: list[int], style: Style | None) -> Text:
        line = Text(no_wrap=True, overflow="crop")
        x = 0
        for index, width in enumerate(widths):
            if width == 0:
                continue
            if x + width > self._viewport_width:
                break
            value = cells[index] if index < len(cells) else ""
            line.append(truncate(value, width).ljust(width))
            x += width
        if style is not None:
            line.pad_right(max(0, self._viewport_width - x))
            line.stylize(style)
        return line

    def table_lines(self) -> list[Text]:
        widths = self.column_widths()
        lines: list[Text] = []
        if self.show_header:
            lines.append(self._render_cells([c.header for c in self.columns], widths, self._header_style))

        end = min(len(self.rows), self.top_row + self.visible_rows)
        for index in range(self.top_row, end):
            row = self.rows[index]
            is_cursor = self.show_cursor and (
                self._identity_of(row) == self.selected_identity
                if self.selected_identity is not None
                else index == self.selected_row
            )
            lines.append(self._render_cells(row, widths, self._cursor_style if is_cursor else None))
        return lines

    def render(self) -> Text:
        return Text("\n", no_wrap=True).join(self.table_lines())
