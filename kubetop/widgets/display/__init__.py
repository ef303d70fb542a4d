"""Display widgets."""

from kubetop.widgets.display.scroll_pane import ScrollPane

__all__ = ["ScrollPane"]
