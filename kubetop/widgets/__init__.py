"""Widgets module for kubetop.

This module provides all reusable widgets organized into submodules:
- data: Data display widgets (ScrollTable)
- display: Display widgets (ScrollPane)
- selection: Selection widgets (SelectionOverlay)
- structure: Structure widgets (StatusBar)
"""

# Base classes
from kubetop.widgets._base import BaseWidget

# Data display widgets
from kubetop.widgets.data import ColumnSpec, ScrollTable

# Display widgets
from kubetop.widgets.display import ScrollPane

# Selection widgets
from kubetop.widgets.selection import SelectionOverlay, SelectionResult

# Structure widgets
from kubetop.widgets.structure import StatusBar

__all__ = [
    "BaseWidget",
    "ColumnSpec",
    "ScrollPane",
    "ScrollTable",
    "SelectionOverlay",
    "SelectionResult",
    "StatusBar",
]
