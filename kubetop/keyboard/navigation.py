"""Screen-specific keyboard bindings.

Cursor keys move the selection overlay when it is shown and the active
view otherwise; the screen's actions route them through the navigator.
"gg" is resolved by the screen from two consecutive "g" presses.
"""

from typing import Annotated

from textual.binding import Binding

# ============================================================================
# DASHBOARD SCREEN BINDINGS
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"] | Binding
] = [
    ("up,k", "move('prev')", "Up"),
    ("down,j", "move('next')", "Down"),
    ("home", "move('top')", "Top"),
    ("end,G", "move('bottom')", "Bottom"),
    ("ctrl+u", "move('half_page_up')", "Half page up"),
    ("ctrl+d", "move('half_page_down')", "Half page down"),
    ("ctrl+b", "move('page_up')", "Page up"),
    ("ctrl+f", "move('page_down')", "Page down"),
    ("p", "toggle_pause", "Pause"),
    ("enter", "confirm", "Select"),
    ("escape", "back", "Back"),
    ("f1", "open_list('sort')", "Sort"),
    ("f2", "open_list('namespace')", "Namespace"),
    ("f3", "open_list('node')", "Node"),
    ("f4", "open_filter", "Status/Type"),
    ("v", "open_list('view')", "View"),
    Binding("tab", "tab_next", "Next container", show=False, priority=True),
    Binding("shift+tab", "tab_prev", "Previous container", show=False, priority=True),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
]
