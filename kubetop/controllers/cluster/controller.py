"""Cluster controller for dashboard data.

Joins raw listings with metrics snapshots, applies filters and sort orders,
and returns immutable row models. Independent queries of one fetch run
concurrently; any failure aborts the whole fetch with its error.
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Any

from kubetop.constants.enums import SortOrder
from kubetop.constants.limits import LOG_TAIL_LINES, MAX_POD_EVENTS
from kubetop.controllers.base import BaseController
from kubetop.controllers.cluster.client import KubectlClient
from kubetop.controllers.cluster.parsers import EventParser, NodeParser, PodParser
from kubetop.controllers.cluster.parsers.common import metadata_name, metadata_namespace
from kubetop.controllers.cluster.sorting import sort_events, sort_nodes, sort_pods
from kubetop.controllers.errors import ClusterInconsistencyError
from kubetop.models.core.event_info import EventInfo
from kubetop.models.core.node_info import NodeInfo
from kubetop.models.core.pod_info import PodDetail, PodInfo
from kubetop.models.core.resource_filter import ResourceFilter

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Aggregates cluster listings into sorted, filtered rows."""

    def __init__(
        self,
        client: KubectlClient,
        *,
        log_tail_lines: int = LOG_TAIL_LINES,
        max_pod_events: int = MAX_POD_EVENTS,
    ) -> None:
        """Initialize the cluster controller.

        Args:
            client: Collaborator issuing the actual cluster queries.
            log_tail_lines: Lines of container log fetched for pod details.
            max_pod_events: Events kept for pod details.
        """
        self.client = client
        self.log_tail_lines = log_tail_lines
        self.max_pod_events = max_pod_events

        self._node_parser = NodeParser()
        self._pod_parser = PodParser()
        self._event_parser = EventParser()

    async def check_connection(self) -> bool:
        return await self.client.check_connection()

    async def cluster_identity(self) -> str:
        return await self.client.cluster_identity()

    async def list_namespaces(self) -> list[str]:
        return await self.client.list_namespaces()

    async def list_node_names(self) -> list[str]:
        return [metadata_name(node) for node in await self.client.list_nodes()]

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    async def fetch_nodes(self, resource_filter: ResourceFilter, sort_order: SortOrder) -> list[NodeInfo]:
        """Join node metrics with the node list.

        Nodes without a metrics sample are left out. A sample for a node
        missing from the listing means the two reads raced.

        Raises:
            ClusterInconsistencyError: metrics name a node the listing lacks.
        """
        del resource_filter  # node rows are never filtered
        metrics, nodes, pods = await asyncio.gather(
            self.client.get_node_metrics(),
            self.client.list_nodes(),
            self.client.list_pods(),
        )
        nodes_by_name = {metadata_name(node): node for node in nodes}
        pod_counts = Counter((pod.get("spec") or {}).get("nodeName", "") for pod in pods)

        rows: list[NodeInfo] = []
        for sample in metrics:
            name = metadata_name(sample)
            node = nodes_by_name.get(name)
            if node is None:
                raise ClusterInconsistencyError(
                    f"node {name!r} reported by metrics is missing from the node list"
                )
            rows.append(self._node_parser.parse_node_info(node, sample, pod_counts[name]))

        return sort_nodes(rows, sort_order)

    # ------------------------------------------------------------------
    # Pods
    # ------------------------------------------------------------------

    async def fetch_pods(self, resource_filter: ResourceFilter, sort_order: SortOrder) -> list[PodInfo]:
        """Join pod metrics with the pod list, then filter and sort.

        Pods missing from the metrics snapshot report zero usage.
        """
        metrics, pods = await asyncio.gather(
            self.client.get_pod_metrics_snapshot(resource_filter.namespace),
            self.client.list_pods(resource_filter.namespace, resource_filter.node),
        )
        metrics_by_key = {
            (metadata_namespace(sample), metadata_name(sample)): sample for sample in metrics
        }

        rows: list[PodInfo] = []
        for pod in pods:
            key = (metadata_namespace(pod), metadata_name(pod))
            row = self._pod_parser.parse_pod_info(pod, metrics_by_key.get(key))
            if resource_filter.namespace and row.namespace != resource_filter.namespace:
                continue
            if resource_filter.node and row.node_name != resource_filter.node:
                continue
            if not resource_filter.matches_status(row.status_rank):
                continue
            rows.append(row)

        return sort_pods(rows, sort_order)

    async def fetch_pod_detail(self, name: str, namespace: str, selected_container: int) -> PodDetail:
        """Fetch one pod with its events, metrics and a log tail.

        The log tail belongs to ``selected_container``; an out-of-range
        index selects the first container.
        """
        pod = await self.client.get_pod(namespace, name)
        containers = (pod.get("spec") or {}).get("containers") or []
        if not 0 <= selected_container < len(containers):
            selected_container = 0

        log_request: Any
        if containers:
            log_request = self.client.get_logs(
                namespace,
                name,
                containers[selected_container].get("name", ""),
                tail_lines=self.log_tail_lines,
            )
        else:
            log_request = _empty_log()

        events, metrics, log_text = await asyncio.gather(
            self.client.list_events(namespace, involved_object_name=name),
            self.client.get_pod_metrics(namespace, name),
            log_request,
        )
        return self._pod_parser.parse_pod_detail(
            pod,
            events=events,
            metrics=metrics,
            log_text=log_text,
            selected_container=selected_container,
            max_events=self.max_pod_events,
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def fetch_events(self, resource_filter: ResourceFilter, sort_order: SortOrder) -> list[EventInfo]:
        """List events narrowed by namespace and type; node filters do not apply."""
        raw_events = await self.client.list_events(
            resource_filter.namespace, event_type=resource_filter.event_type
        )
        rows = []
        for raw_event in raw_events:
            row = self._event_parser.parse_event(raw_event)
            if resource_filter.event_type and row.type != resource_filter.event_type:
                continue
            rows.append(row)
        return sort_events(rows, sort_order)

    async def fetch_event_detail(self, name: str, namespace: str) -> EventInfo:
        return self._event_parser.parse_event(await self.client.get_event(namespace, name))


async def _empty_log() -> str:
    return ""
