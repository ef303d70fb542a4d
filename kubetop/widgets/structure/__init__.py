"""Structure widgets."""

from kubetop.widgets.structure.status_bar import StatusBar, build_status_text, status_parts

__all__ = ["StatusBar", "build_status_text", "status_parts"]
