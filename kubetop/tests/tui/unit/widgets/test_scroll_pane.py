"""Tests for ScrollPane."""

from __future__ import annotations

from kubetop.widgets.display import ScrollPane


class TestScrollPane:
    """Tests for line-based scrolling."""

    def test_set_text_splits_lines(self) -> None:
        pane = ScrollPane("Logs")
        pane.set_text("a\nb\nc")
        assert pane.lines == ["a", "b", "c"]
        assert pane.border_title == "Logs"

    def test_scroll_clamps(self) -> None:
        pane = ScrollPane()
        pane.set_lines(["a", "b", "c"])
        pane.move_up()
        assert pane.line_offset == 0
        pane.move_bottom()
        pane.move_down()
        assert pane.line_offset == 2
        assert pane.visible_text() == "c"

    def test_offset_kept_on_refresh(self) -> None:
        pane = ScrollPane()
        pane.set_lines(["a", "b", "c", "d"])
        pane.move_down()
        pane.set_lines(["w", "x", "y", "z"])
        assert pane.line_offset == 1
        pane.set_lines(["only"])
        assert pane.line_offset == 0

    def test_empty(self) -> None:
        pane = ScrollPane()
        pane.set_lines([])
        pane.move_page_down()
        assert pane.line_offset == 0
        assert pane.visible_text() == ""
