"""Base widget classes for reusable components.

This module provides the foundation for the dashboard widgets: default
CSS class composition and a refresh helper that is safe to call before
the widget is mounted (views are built and fed rows before mounting).

Example:
    >>> from kubetop.widgets._base import BaseWidget
    >>>
    >>> class StatusStrip(BaseWidget):
    ...     _default_classes = "widget-status-strip"
"""

from __future__ import annotations

from typing import ClassVar

from textual.widget import Widget


class BaseWidget(Widget):
    """Base widget with configuration support for consistent widget patterns.

    Attributes:
        _default_classes: Default CSS classes for the widget.
    """

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
        **kwargs,
    ) -> None:
        """Initialize the base widget.

        Args:
            id: Explicit widget ID.
            classes: CSS classes to apply to the widget.
            **kwargs: Additional keyword arguments passed to Widget.
        """
        super().__init__(id=id, classes=classes, **kwargs)

        # Apply default classes after super().__init__ (which already applied `classes`)
        if self._default_classes:
            self.add_class(*self._default_classes.split())

    def _refresh_if_mounted(self) -> None:
        if self.is_mounted:
            self.refresh()
