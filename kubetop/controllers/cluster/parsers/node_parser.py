"""Node parser for cluster controller - parses node data into structured formats."""

from __future__ import annotations

from typing import Any

from kubetop.controllers.cluster.parsers.common import metadata_name
from kubetop.models.core.node_info import NodeInfo
from kubetop.utils.resource_parser import cpu_to_millicores, memory_str_to_bytes


class NodeParser:
    """Parses node data into structured formats."""

    _EXTERNAL_IP = "ExternalIP"
    _INTERNAL_IP = "InternalIP"

    def _get_address(self, node: dict[str, Any], address_type: str) -> str:
        """Return the last address of the given type, like kubectl describe does."""
        value = ""
        for address in (node.get("status") or {}).get("addresses") or []:
            if address.get("type") == address_type:
                value = address.get("address", "")
        return value

    def parse_node_info(
        self,
        node: dict[str, Any],
        metrics: dict[str, Any],
        pod_count: int = 0,
    ) -> NodeInfo:
        """Parse a node and its metrics sample into NodeInfo.

        Args:
            node: Raw node dictionary from API
            metrics: Raw NodeMetrics item for the same node
            pod_count: Number of pods scheduled on this node

        Returns:
            NodeInfo object.
        """
        allocatable = (node.get("status") or {}).get("allocatable") or {}
        usage = metrics.get("usage") or {}

        return NodeInfo(
            name=metadata_name(node),
            pod_count=pod_count,
            memory_used=memory_str_to_bytes(usage.get("memory", "")),
            memory_total=memory_str_to_bytes(allocatable.get("memory", "")),
            cpu_used=cpu_to_millicores(usage.get("cpu", "")),
            cpu_total=cpu_to_millicores(allocatable.get("cpu", "")),
            external_ip=self._get_address(node, self._EXTERNAL_IP),
            internal_ip=self._get_address(node, self._INTERNAL_IP),
        )
