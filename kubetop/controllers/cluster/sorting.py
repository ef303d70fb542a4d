"""Sort orders per view.

Each view accepts a closed set of orders. Sorting is stable, descending
orders included, so equal keys keep their listing order between refreshes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from kubetop.constants.enums import SortOrder, ViewType
from kubetop.models.core.event_info import EventInfo
from kubetop.models.core.node_info import NodeInfo
from kubetop.models.core.pod_info import PodInfo

T = TypeVar("T")

SortSpec = tuple[Callable[[Any], Any], bool]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

NODE_SORTS: dict[SortOrder, SortSpec] = {
    SortOrder.CPU_ASC: (lambda n: n.cpu_used, False),
    SortOrder.CPU_DESC: (lambda n: n.cpu_used, True),
    SortOrder.MEMORY_ASC: (lambda n: n.memory_used, False),
    SortOrder.MEMORY_DESC: (lambda n: n.memory_used, True),
    SortOrder.NAME: (lambda n: n.name, False),
    SortOrder.PODS_ASC: (lambda n: n.pod_count, False),
    SortOrder.PODS_DESC: (lambda n: n.pod_count, True),
}

POD_SORTS: dict[SortOrder, SortSpec] = {
    SortOrder.CPU_ASC: (lambda p: p.cpu, False),
    SortOrder.CPU_DESC: (lambda p: p.cpu, True),
    SortOrder.MEMORY_ASC: (lambda p: p.memory, False),
    SortOrder.MEMORY_DESC: (lambda p: p.memory, True),
    SortOrder.NAME: (lambda p: p.name, False),
    SortOrder.NAMESPACE: (lambda p: p.namespace, False),
    SortOrder.RESTARTS_ASC: (lambda p: p.restarts, False),
    SortOrder.RESTARTS_DESC: (lambda p: p.restarts, True),
    SortOrder.STATUS: (lambda p: p.status_rank, False),
}

EVENT_SORTS: dict[SortOrder, SortSpec] = {
    SortOrder.NAME: (lambda e: e.involved_name, False),
    SortOrder.NAMESPACE: (lambda e: e.namespace, False),
    SortOrder.TIMESTAMP_ASC: (lambda e: e.last_seen or _EPOCH, False),
    SortOrder.TIMESTAMP_DESC: (lambda e: e.last_seen or _EPOCH, True),
}

SORT_ORDERS_BY_VIEW: dict[ViewType, tuple[SortOrder, ...]] = {
    ViewType.NODES: tuple(NODE_SORTS),
    ViewType.PODS: tuple(POD_SORTS),
    ViewType.EVENTS: tuple(EVENT_SORTS),
}


def _stable_sort(items: Sequence[T], order: SortOrder, table: dict[SortOrder, SortSpec], kind: str) -> list[T]:
    try:
        key, reverse = table[order]
    except KeyError:
        raise ValueError(f"unsupported sort order for {kind}: {order.value!r}") from None
    return sorted(items, key=key, reverse=reverse)


def sort_nodes(nodes: Sequence[NodeInfo], order: SortOrder) -> list[NodeInfo]:
    return _stable_sort(nodes, order, NODE_SORTS, "nodes")


def sort_pods(pods: Sequence[PodInfo], order: SortOrder) -> list[PodInfo]:
    return _stable_sort(pods, order, POD_SORTS, "pods")


def sort_events(events: Sequence[EventInfo], order: SortOrder) -> list[EventInfo]:
    return _stable_sort(events, order, EVENT_SORTS, "events")
