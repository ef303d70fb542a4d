"""Shared fixtures for dashboard view and navigator tests."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from kubetop.models.core.event_info import EventInfo
from kubetop.models.core.node_info import NodeInfo
from kubetop.models.core.pod_info import ContainerInfo, PodDetail, PodInfo

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def nodes() -> list[NodeInfo]:
    return [
        NodeInfo(name="node-a", pod_count=3, cpu_used=500, cpu_total=2000,
                 memory_used=1024**3, memory_total=4 * 1024**3, internal_ip="10.0.0.1"),
        NodeInfo(name="node-b", pod_count=1, cpu_used=100, cpu_total=2000,
                 memory_used=512 * 1024**2, memory_total=4 * 1024**3),
    ]


@pytest.fixture
def pods() -> list[PodInfo]:
    return [
        PodInfo(namespace="default", name="web-1", node_name="node-a", cpu=150,
                memory=100 * 1024**2, cpu_limit=200, cpu_limit_container_count=1,
                container_count=2, ready_count=2, restarts=7, created_at=CREATED, ip="10.1.0.5"),
        PodInfo(namespace="kube-system", name="dns-1", node_name="node-b", container_count=1,
                ready_count=0, status="CrashLoopBackOff"),
    ]


@pytest.fixture
def events() -> list[EventInfo]:
    return [
        EventInfo(uid="uid-1", namespace="default", name="web-1.17a", involved_kind="Pod",
                  involved_name="web-1", type="Warning", reason="BackOff",
                  message="Back-off\nrestarting", count=4, last_seen=CREATED),
        EventInfo(uid="uid-2", namespace="kube-system", name="dns-1.17b", involved_kind="Pod",
                  involved_name="dns-1", type="Normal", reason="Pulled", count=1),
    ]


@pytest.fixture
def pod_detail() -> PodDetail:
    return PodDetail(
        name="web-1",
        namespace="default",
        containers=[ContainerInfo(name="app"), ContainerInfo(name="sidecar"), ContainerInfo(name="proxy")],
        log_lines=["line 1", "line 2"],
    )


def _echo_container(detail: PodDetail):
    """Answer like the controller: the requested container, or 0 when out of range."""

    async def fetch(name: str, namespace: str, selected_container: int) -> PodDetail:
        if not 0 <= selected_container < len(detail.containers):
            selected_container = 0
        return detail.model_copy(update={"selected_container": selected_container})

    return fetch


@pytest.fixture
def controller(nodes, pods, events, pod_detail) -> MagicMock:
    """Controller double returning the fixture listings."""
    mock = MagicMock()
    mock.max_pod_events = 5
    mock.fetch_nodes = AsyncMock(return_value=nodes)
    mock.fetch_pods = AsyncMock(return_value=pods)
    mock.fetch_events = AsyncMock(return_value=events)
    mock.fetch_event_detail = AsyncMock(return_value=events[0])
    mock.fetch_pod_detail = AsyncMock(side_effect=_echo_container(pod_detail))
    mock.list_namespaces = AsyncMock(return_value=["default", "kube-system"])
    mock.list_node_names = AsyncMock(return_value=["node-a", "node-b"])
    return mock
