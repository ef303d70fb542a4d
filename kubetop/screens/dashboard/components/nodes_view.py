"""Nodes view - usage per node."""

from __future__ import annotations

from kubetop.constants.enums import ViewType
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.screens.dashboard.components.base_view import DrillTarget, TableView
from kubetop.screens.dashboard.config import NODE_COLUMNS
from kubetop.utils.formatting import format_bytes, format_percentage


class NodesView(TableView):
    view_type = ViewType.NODES
    COLUMNS = NODE_COLUMNS
    UNIQUE_COLUMN = 0

    async def fetch_rows(self) -> list[list[str]]:
        nodes = await self.controller.fetch_nodes(self.resource_filter, self.sort_by)
        return [
            [
                node.name,
                str(node.pod_count),
                format_percentage(node.cpu_used, node.cpu_total),
                format_percentage(node.memory_used, node.memory_total),
                format_bytes(node.memory_total),
                node.external_ip,
                node.internal_ip,
            ]
            for node in nodes
        ]

    def drill_target(self) -> DrillTarget | None:
        """Pods scheduled on the node under the cursor."""
        values = self.selected_values()
        if not values:
            return None
        return DrillTarget(ViewType.PODS, ResourceFilter(node=values[0]))
