"""Fixtures for running the dashboard headless against a controller double."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from kubetop.app import KubetopApp
from kubetop.constants.enums import ViewType
from kubetop.models.core.event_info import EventInfo
from kubetop.models.core.node_info import NodeInfo
from kubetop.models.core.pod_info import ContainerInfo, PodDetail, PodInfo
from kubetop.models.state.app_settings import AppSettings

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _fetch_pod_detail(name: str, namespace: str, selected_container: int) -> PodDetail:
    """Log tail of the requested container, the first one when out of range."""
    containers = [ContainerInfo(name="app"), ContainerInfo(name="sidecar")]
    if not 0 <= selected_container < len(containers):
        selected_container = 0
    return PodDetail(
        name=name,
        namespace=namespace,
        containers=containers,
        log_lines=[f"{containers[selected_container].name} started"],
        selected_container=selected_container,
    )


@pytest.fixture
def controller() -> MagicMock:
    mock = MagicMock()
    mock.max_pod_events = 5
    mock.cluster_identity = AsyncMock(return_value="https://cluster.example:6443")
    mock.list_namespaces = AsyncMock(return_value=["default", "kube-system"])
    mock.list_node_names = AsyncMock(return_value=["node-a"])
    mock.fetch_nodes = AsyncMock(
        return_value=[NodeInfo(name="node-a", pod_count=2, cpu_used=100, cpu_total=1000)]
    )
    mock.fetch_pods = AsyncMock(
        return_value=[
            PodInfo(namespace="default", name="web-1", node_name="node-a", created_at=CREATED),
            PodInfo(namespace="default", name="web-2", node_name="node-a", created_at=CREATED),
        ]
    )
    mock.fetch_events = AsyncMock(
        return_value=[EventInfo(uid="uid-1", namespace="default", name="web-1.1", involved_name="web-1")]
    )
    mock.fetch_event_detail = AsyncMock(
        return_value=EventInfo(uid="uid-1", namespace="default", name="web-1.1", involved_name="web-1")
    )
    mock.fetch_pod_detail = AsyncMock(side_effect=_fetch_pod_detail)
    return mock


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(refresh_interval=60)


@pytest.fixture
def app(controller: MagicMock, settings: AppSettings) -> KubetopApp:
    return KubetopApp(controller, settings, ViewType.PODS)
