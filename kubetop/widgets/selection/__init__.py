"""Selection widgets."""

from kubetop.widgets.selection.selection_overlay import (
    SelectionOverlay,
    SelectionResult,
    SelectionSource,
)

__all__ = ["SelectionOverlay", "SelectionResult", "SelectionSource"]
