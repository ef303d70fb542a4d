"""Pod parser for cluster controller - derives status and aggregates usage."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from kubetop.constants.enums import StatusRank
from kubetop.controllers.cluster.parsers.common import (
    metadata_name,
    metadata_namespace,
    parse_timestamp,
)
from kubetop.models.core.pod_info import (
    ContainerInfo,
    OwnerReference,
    PodDetail,
    PodEventInfo,
    PodInfo,
)
from kubetop.utils.resource_parser import (
    cpu_to_millicores,
    memory_str_to_bytes,
    parse_cpu_from_dict,
    parse_memory_from_dict,
)

RUNNING_STATUS = "Running"
UNKNOWN_CONTAINER_STATUS = "-"


def derive_container_status(container_status: dict[str, Any]) -> tuple[str, StatusRank]:
    """Map one container status to a label and rank.

    A waiting state wins over a terminated one; neither means running.
    """
    state = container_status.get("state") or {}
    waiting = state.get("waiting")
    if waiting is not None:
        return waiting.get("reason") or "Waiting", StatusRank.WAITING
    terminated = state.get("terminated")
    if terminated is not None:
        return terminated.get("reason") or "Terminated", StatusRank.TERMINATED
    return RUNNING_STATUS, StatusRank.RUNNING


def derive_pod_status(container_statuses: Iterable[dict[str, Any]]) -> tuple[str, StatusRank]:
    """Reduce container statuses to the pod status.

    The first container that is waiting or terminated decides; otherwise
    the pod is running.
    """
    for container_status in container_statuses:
        label, rank = derive_container_status(container_status)
        if rank is not StatusRank.RUNNING:
            return label, rank
    return RUNNING_STATUS, StatusRank.RUNNING


def container_usage(metrics: dict[str, Any] | None) -> dict[str, tuple[int, int]]:
    """Index a PodMetrics item by container name -> (millicores, bytes)."""
    usage: dict[str, tuple[int, int]] = {}
    if not metrics:
        return usage
    for container in metrics.get("containers") or []:
        values = container.get("usage") or {}
        usage[container.get("name", "")] = (
            cpu_to_millicores(values.get("cpu", "")),
            memory_str_to_bytes(values.get("memory", "")),
        )
    return usage


class PodParser:
    """Parses pod data into structured formats."""

    def parse_pod_info(self, pod: dict[str, Any], metrics: dict[str, Any] | None) -> PodInfo:
        """Parse a pod and its (optional) metrics sample into PodInfo.

        Args:
            pod: Raw pod dictionary from API
            metrics: Raw PodMetrics item, or None when the pod has no sample

        Returns:
            PodInfo object. Usage is 0 when ``metrics`` is None.
        """
        spec = pod.get("spec") or {}
        status = pod.get("status") or {}
        containers = spec.get("containers") or []
        container_statuses = status.get("containerStatuses") or []

        cpu = memory = 0
        for container_cpu, container_memory in container_usage(metrics).values():
            cpu += container_cpu
            memory += container_memory

        cpu_limit = memory_limit = 0
        cpu_limit_count = memory_limit_count = 0
        for container in containers:
            container_cpu_limit = parse_cpu_from_dict(container, "limits")
            container_memory_limit = parse_memory_from_dict(container, "limits")
            cpu_limit += container_cpu_limit
            memory_limit += container_memory_limit
            if container_cpu_limit:
                cpu_limit_count += 1
            if container_memory_limit:
                memory_limit_count += 1

        label, rank = derive_pod_status(container_statuses)

        return PodInfo(
            namespace=metadata_namespace(pod),
            name=metadata_name(pod),
            node_name=spec.get("nodeName", ""),
            cpu=cpu,
            memory=memory,
            cpu_limit=cpu_limit,
            cpu_limit_container_count=cpu_limit_count,
            memory_limit=memory_limit,
            memory_limit_container_count=memory_limit_count,
            container_count=len(containers),
            ready_count=sum(1 for cs in container_statuses if cs.get("ready")),
            status=label,
            status_rank=rank,
            restarts=sum(int(cs.get("restartCount") or 0) for cs in container_statuses),
            created_at=parse_timestamp((pod.get("metadata") or {}).get("creationTimestamp")),
            ip=status.get("podIP", ""),
        )

    def parse_containers(
        self, pod: dict[str, Any], metrics: dict[str, Any] | None
    ) -> list[ContainerInfo]:
        usage = container_usage(metrics)
        statuses = {
            cs.get("name", ""): cs
            for cs in (pod.get("status") or {}).get("containerStatuses") or []
        }
        containers: list[ContainerInfo] = []
        for container in (pod.get("spec") or {}).get("containers") or []:
            name = container.get("name", "")
            cpu, memory = usage.get(name, (0, 0))
            container_status = statuses.get(name)
            if container_status is None:
                restarts, label = 0, UNKNOWN_CONTAINER_STATUS
            else:
                restarts = int(container_status.get("restartCount") or 0)
                label, _ = derive_container_status(container_status)
            containers.append(
                ContainerInfo(
                    name=name,
                    restarts=restarts,
                    status=label,
                    cpu=cpu,
                    memory=memory,
                    cpu_request=parse_cpu_from_dict(container, "requests"),
                    memory_request=parse_memory_from_dict(container, "requests"),
                    cpu_limit=parse_cpu_from_dict(container, "limits"),
                    memory_limit=parse_memory_from_dict(container, "limits"),
                )
            )
        return containers

    @staticmethod
    def parse_pod_events(events: list[dict[str, Any]], limit: int) -> list[PodEventInfo]:
        """Return the newest ``limit`` events, newest first."""
        parsed = [
            PodEventInfo(
                message=event.get("message", ""),
                timestamp=parse_timestamp(
                    event.get("lastTimestamp")
                    or event.get("eventTime")
                    or (event.get("metadata") or {}).get("creationTimestamp")
                ),
            )
            for event in events
        ]
        parsed.sort(key=lambda e: e.timestamp.timestamp() if e.timestamp else 0.0, reverse=True)
        return parsed[:limit]

    @staticmethod
    def parse_log_lines(log_text: str) -> list[str]:
        """Split a log tail newest first, dropping the trailing newline's empty line."""
        lines = log_text.split("\n")
        lines.reverse()
        if lines and lines[0] == "":
            lines = lines[1:]
        return lines

    def parse_pod_detail(
        self,
        pod: dict[str, Any],
        *,
        events: list[dict[str, Any]],
        metrics: dict[str, Any] | None,
        log_text: str,
        selected_container: int,
        max_events: int,
    ) -> PodDetail:
        metadata = pod.get("metadata") or {}
        status = pod.get("status") or {}
        label, _ = derive_pod_status(status.get("containerStatuses") or [])

        return PodDetail(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            node_name=(pod.get("spec") or {}).get("nodeName", ""),
            status=label,
            ip=status.get("podIP", ""),
            created_at=parse_timestamp(metadata.get("creationTimestamp")),
            owners=[
                OwnerReference(kind=owner.get("kind", ""), name=owner.get("name", ""))
                for owner in metadata.get("ownerReferences") or []
            ],
            labels=dict(metadata.get("labels") or {}),
            annotations=dict(metadata.get("annotations") or {}),
            events=self.parse_pod_events(events, max_events),
            containers=self.parse_containers(pod, metrics),
            log_lines=self.parse_log_lines(log_text),
            selected_container=selected_container,
        )
