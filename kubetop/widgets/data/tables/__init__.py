"""Table widgets."""

from kubetop.widgets.data.tables.scroll_table import ColumnSpec, ScrollTable, truncate

__all__ = ["ColumnSpec", "ScrollTable", "truncate"]
