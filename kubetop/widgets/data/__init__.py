"""Data display widgets."""

from kubetop.widgets.data.tables import ColumnSpec, ScrollTable

__all__ = ["ColumnSpec", "ScrollTable"]
