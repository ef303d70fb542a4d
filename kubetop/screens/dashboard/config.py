"""Dashboard screen configuration.

Static enumerations offered by the selection overlay, the lists each view
accepts, and the column layout of every view's table. Column widths follow
a 200-column terminal; each table has one elastic column.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from kubetop.constants.enums import EventType, ListType, SortOrder, StatusRank, ViewType
from kubetop.controllers.cluster.sorting import SORT_ORDERS_BY_VIEW
from kubetop.widgets.data.tables import ColumnSpec

# ============================================================================
# Selection lists
# ============================================================================

LIST_TITLES: dict[ListType, str] = {
    ListType.SORT: "Sort by ...",
    ListType.NAMESPACE: "Filter by Namespace ...",
    ListType.NODE: "Filter by Node ...",
    ListType.STATUS: "Filter by Status ...",
    ListType.EVENT_TYPE: "Filter by Event Type ...",
    ListType.VIEW: "Select View ...",
}

STATUS_CHOICES: tuple[tuple[str, StatusRank | None], ...] = (
    ("-", None),
    (StatusRank.RUNNING.label, StatusRank.RUNNING),
    (StatusRank.WAITING.label, StatusRank.WAITING),
    (StatusRank.TERMINATED.label, StatusRank.TERMINATED),
)

EVENT_TYPE_CHOICES: tuple[tuple[str, str], ...] = (
    ("-", ""),
    (EventType.NORMAL.value, EventType.NORMAL.value),
    (EventType.WARNING.value, EventType.WARNING.value),
)

VIEW_CHOICES: tuple[ViewType, ...] = (ViewType.PODS, ViewType.NODES, ViewType.EVENTS)

ALLOWED_LISTS: dict[ViewType, frozenset[ListType]] = {
    ViewType.NODES: frozenset({ListType.SORT}),
    ViewType.PODS: frozenset({ListType.SORT, ListType.NAMESPACE, ListType.NODE, ListType.STATUS}),
    ViewType.EVENTS: frozenset({ListType.SORT, ListType.NAMESPACE, ListType.EVENT_TYPE}),
    ViewType.POD_DETAILS: frozenset(),
    ViewType.EVENT_DETAILS: frozenset(),
}


@dataclass(frozen=True)
class SelectionListConfig:
    """Everything the selection overlay may offer, per view."""

    sort_orders: Mapping[ViewType, tuple[SortOrder, ...]] = field(
        default_factory=lambda: dict(SORT_ORDERS_BY_VIEW)
    )
    statuses: tuple[tuple[str, StatusRank | None], ...] = STATUS_CHOICES
    event_types: tuple[tuple[str, str], ...] = EVENT_TYPE_CHOICES
    views: tuple[ViewType, ...] = VIEW_CHOICES
    allowed_lists: Mapping[ViewType, frozenset[ListType]] = field(
        default_factory=lambda: dict(ALLOWED_LISTS)
    )
    titles: Mapping[ListType, str] = field(default_factory=lambda: dict(LIST_TITLES))

    def allows(self, view_type: ViewType, list_type: ListType) -> bool:
        """View switching is offered everywhere; other lists per view."""
        if list_type is ListType.VIEW:
            return True
        return list_type in self.allowed_lists.get(view_type, frozenset())


# ============================================================================
# Table columns
# ============================================================================

NODE_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("NAME", 40, elastic=True),
    ColumnSpec("PODS", 20),
    ColumnSpec("CPU", 20),
    ColumnSpec("MEMORY", 20),
    ColumnSpec("MEMORY MAX", 20),
    ColumnSpec("EXTERNAL IP", 40),
    ColumnSpec("INTERNAL IP", 40),
)

# The last column is a hidden namespace/name key so identical pod names in
# different namespaces keep distinct cursor identities.
POD_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("NAMESPACE", 20),
    ColumnSpec("POD", 40, elastic=True),
    ColumnSpec("READY", 10),
    ColumnSpec("STATUS", 20),
    ColumnSpec("RESTARTS", 10),
    ColumnSpec("CPU", 15),
    ColumnSpec("CPU MAX", 15),
    ColumnSpec("MEMORY", 15),
    ColumnSpec("MEMORY MAX", 15),
    ColumnSpec("IP", 20),
    ColumnSpec("AGE", 10),
    ColumnSpec("", 0),
)
POD_UNIQUE_COLUMN = 11

EVENT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("", 0),  # uid
    ColumnSpec("AGE", 10),
    ColumnSpec("COUNT", 10),
    ColumnSpec("TYPE", 10),
    ColumnSpec("NAMESPACE", 20),
    ColumnSpec("NAME", 50),
    ColumnSpec("MESSAGE", 80, elastic=True),
    ColumnSpec("", 0),  # kind
    ColumnSpec("", 0),  # reason
    ColumnSpec("", 0),  # source
    ColumnSpec("", 0),  # node
    ColumnSpec("", 0),  # event object name
)
EVENT_NAME_COLUMN = 11
EVENT_NAMESPACE_COLUMN = 4

CONTAINER_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("NAME", 40, elastic=True),
    ColumnSpec("RESTARTS", 20),
    ColumnSpec("STATUS", 40),
    ColumnSpec("CPU", 20),
    ColumnSpec("CPU MIN", 20),
    ColumnSpec("CPU MAX", 20),
    ColumnSpec("MEMORY", 20),
    ColumnSpec("MEMORY MIN", 20),
    ColumnSpec("MEMORY MAX", 20),
)
