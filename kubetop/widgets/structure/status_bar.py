"""StatusBar - one-line strip with sort, filters, pause state and cluster.

CSS Classes: widget-status-bar
"""

from __future__ import annotations

from typing import ClassVar

from rich.style import Style
from rich.text import Text

from kubetop.constants.enums import SortOrder, ViewType
from kubetop.constants.values import ALL_VALUES, ERROR_BANNER_STYLE, STATUS_BAR_STYLE
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.widgets._base import BaseWidget

_PART_GAP = "  "
_CLUSTER_MIN_GAP = 10


def status_parts(
    view_type: ViewType,
    sort_order: SortOrder,
    resource_filter: ResourceFilter,
    paused: bool,
) -> list[str]:
    """Left-hand parts of the status bar for a view."""
    parts: list[str] = []
    if not view_type.is_detail:
        parts.append(f"[F1] Sorted by {sort_order.value}")
    if view_type in (ViewType.PODS, ViewType.EVENTS):
        parts.append(f"[F2] Namespace: {resource_filter.namespace or ALL_VALUES}")
    if view_type is ViewType.PODS:
        status = resource_filter.status.label if resource_filter.status is not None else ALL_VALUES
        parts.append(f"[F3] Node: {resource_filter.node or ALL_VALUES}")
        parts.append(f"[F4] Status: {status}")
    if view_type is ViewType.EVENTS:
        parts.append(f"[F4] Type: {resource_filter.event_type or ALL_VALUES}")
    parts.append("[P] Paused" if paused else "[P] Updated")
    return parts


def build_status_text(
    view_type: ViewType,
    sort_order: SortOrder,
    resource_filter: ResourceFilter,
    paused: bool,
    cluster: str,
    width: int,
) -> str:
    """Compose the status line.

    The cluster name is right aligned but never starts closer than ten
    columns to the left-hand parts; on narrow terminals it is cut off.
    """
    left = _PART_GAP.join(status_parts(view_type, sort_order, resource_filter, paused))
    cluster_x = max(width - len(cluster), len(left) + _CLUSTER_MIN_GAP)
    line = left.ljust(cluster_x) + cluster
    return line[:width] if width > 0 else line


class StatusBar(BaseWidget):
    """Stateless-render status strip docked under the active view."""

    _default_classes: ClassVar[str] = "widget-status-bar"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.view_type = ViewType.PODS
        self.sort_by = SortOrder.NAMESPACE
        self.resource_filter = ResourceFilter()
        self.paused = False
        self.cluster = ""
        self.error: str | None = None

    def set_state(
        self,
        view_type: ViewType,
        sort_order: SortOrder,
        resource_filter: ResourceFilter,
        paused: bool,
    ) -> None:
        self.view_type = view_type
        self.sort_by = sort_order
        self.resource_filter = resource_filter
        self.paused = paused
        self._refresh_if_mounted()

    def set_cluster(self, cluster: str) -> None:
        self.cluster = cluster
        self._refresh_if_mounted()

    def set_error(self, error: str | None) -> None:
        self.error = error
        self._refresh_if_mounted()

    def render(self) -> Text:
        width = self.size.width
        if self.error:
            left = _PART_GAP.join(
                status_parts(self.view_type, self.sort_by, self.resource_filter, self.paused)
            )
            text = Text(left + _PART_GAP, style=Style.parse(STATUS_BAR_STYLE), no_wrap=True)
            text.append(f" {self.error} ", style=Style.parse(ERROR_BANNER_STYLE))
            text.truncate(width, pad=True)
            return text
        line = build_status_text(
            self.view_type,
            self.sort_by,
            self.resource_filter,
            self.paused,
            self.cluster,
            width,
        )
        return Text(line.ljust(width), style=Style.parse(STATUS_BAR_STYLE), no_wrap=True)
