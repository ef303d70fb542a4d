"""Pods view - aggregated usage, limits and health per pod."""

from __future__ import annotations

from kubetop.constants.enums import ViewType
from kubetop.screens.dashboard.components.base_view import DrillTarget, TableView
from kubetop.screens.dashboard.config import POD_COLUMNS, POD_UNIQUE_COLUMN
from kubetop.utils.formatting import (
    format_age,
    format_bytes,
    format_cpu,
    render_cpu_limit,
    render_memory_limit,
)


class PodsView(TableView):
    view_type = ViewType.PODS
    COLUMNS = POD_COLUMNS
    UNIQUE_COLUMN = POD_UNIQUE_COLUMN

    async def fetch_rows(self) -> list[list[str]]:
        pods = await self.controller.fetch_pods(self.resource_filter, self.sort_by)
        now = self.now()
        return [
            [
                pod.namespace,
                pod.name,
                f"{pod.ready_count}/{pod.container_count}",
                pod.status,
                str(pod.restarts),
                format_cpu(pod.cpu),
                render_cpu_limit(pod.cpu_limit, pod.cpu_limit_container_count, pod.container_count),
                format_bytes(pod.memory),
                render_memory_limit(
                    pod.memory_limit, pod.memory_limit_container_count, pod.container_count
                ),
                pod.ip,
                format_age(pod.created_at, now),
                f"{pod.namespace}/{pod.name}",
            ]
            for pod in pods
        ]

    def selected_pod(self) -> tuple[str, str] | None:
        """Return (name, namespace) of the pod under the cursor."""
        values = self.selected_values()
        if not values:
            return None
        return values[1], values[0]

    def drill_target(self) -> DrillTarget | None:
        pod = self.selected_pod()
        if pod is None:
            return None
        name, namespace = pod
        return DrillTarget(ViewType.POD_DETAILS, name=name, namespace=namespace)
