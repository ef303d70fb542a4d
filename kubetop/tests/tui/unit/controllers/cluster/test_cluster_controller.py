"""Tests for cluster controller."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from kubetop.constants.enums import SortOrder, StatusRank
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.controllers.errors import ClusterInconsistencyError, KubectlError
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.utils.formatting import format_bytes, format_cpu, format_percentage

from .fixtures import (
    make_container,
    make_event,
    make_node,
    make_node_metrics,
    make_pod,
    make_pod_metrics,
)


@pytest.fixture
def client() -> MagicMock:
    """Create a client whose queries return empty listings."""
    mock = MagicMock()
    mock.list_nodes = AsyncMock(return_value=[])
    mock.get_node_metrics = AsyncMock(return_value=[])
    mock.list_pods = AsyncMock(return_value=[])
    mock.get_pod_metrics_snapshot = AsyncMock(return_value=[])
    mock.get_pod = AsyncMock()
    mock.get_pod_metrics = AsyncMock(return_value={})
    mock.get_logs = AsyncMock(return_value="")
    mock.list_events = AsyncMock(return_value=[])
    mock.get_event = AsyncMock()
    mock.list_namespaces = AsyncMock(return_value=["default", "kube-system"])
    mock.check_connection = AsyncMock(return_value=True)
    mock.cluster_identity = AsyncMock(return_value="https://api.example:6443")
    return mock


@pytest.fixture
def controller(client: MagicMock) -> ClusterController:
    return ClusterController(client, log_tail_lines=50, max_pod_events=5)


class TestClusterControllerPassThrough:
    """Tests for the thin lookups used by the status bar and overlay."""

    @pytest.mark.asyncio
    async def test_cluster_identity(self, controller: ClusterController) -> None:
        assert await controller.cluster_identity() == "https://api.example:6443"

    @pytest.mark.asyncio
    async def test_list_node_names(self, controller: ClusterController, client: MagicMock) -> None:
        client.list_nodes.return_value = [make_node("a"), make_node("b")]
        assert await controller.list_node_names() == ["a", "b"]


class TestFetchNodes:
    """Tests for ClusterController.fetch_nodes."""

    @pytest.mark.asyncio
    async def test_memory_percentage(self, controller: ClusterController, client: MagicMock) -> None:
        """Test a node using 512Mi of 2Gi reports 25.00%."""
        client.list_nodes.return_value = [make_node("node-a", memory="2Gi")]
        client.get_node_metrics.return_value = [make_node_metrics("node-a", memory="512Mi")]

        nodes = await controller.fetch_nodes(ResourceFilter(), SortOrder.NAME)

        assert format_percentage(nodes[0].memory_used, nodes[0].memory_total) == "25.00%"

    @pytest.mark.asyncio
    async def test_pod_counts(self, controller: ClusterController, client: MagicMock) -> None:
        client.list_nodes.return_value = [make_node("node-a"), make_node("node-b")]
        client.get_node_metrics.return_value = [make_node_metrics("node-a"), make_node_metrics("node-b")]
        client.list_pods.return_value = [
            make_pod("p1", node="node-a"),
            make_pod("p2", node="node-a"),
            make_pod("p3", node="node-b"),
        ]

        nodes = await controller.fetch_nodes(ResourceFilter(), SortOrder.PODS_DESC)

        assert [(n.name, n.pod_count) for n in nodes] == [("node-a", 2), ("node-b", 1)]

    @pytest.mark.asyncio
    async def test_nodes_without_metrics_are_skipped(
        self, controller: ClusterController, client: MagicMock
    ) -> None:
        client.list_nodes.return_value = [make_node("node-a"), make_node("node-b")]
        client.get_node_metrics.return_value = [make_node_metrics("node-b")]

        nodes = await controller.fetch_nodes(ResourceFilter(), SortOrder.NAME)

        assert [n.name for n in nodes] == ["node-b"]

    @pytest.mark.asyncio
    async def test_metrics_for_unknown_node(self, controller: ClusterController, client: MagicMock) -> None:
        """Test a metrics sample for an unlisted node aborts the fetch."""
        client.list_nodes.return_value = [make_node("node-a")]
        client.get_node_metrics.return_value = [make_node_metrics("node-a"), make_node_metrics("ghost")]

        with pytest.raises(ClusterInconsistencyError, match="ghost"):
            await controller.fetch_nodes(ResourceFilter(), SortOrder.NAME)

    @pytest.mark.asyncio
    async def test_query_failure_propagates(self, controller: ClusterController, client: MagicMock) -> None:
        client.get_node_metrics.side_effect = KubectlError("metrics API unavailable")

        with pytest.raises(KubectlError):
            await controller.fetch_nodes(ResourceFilter(), SortOrder.NAME)


class TestFetchPods:
    """Tests for ClusterController.fetch_pods."""

    @pytest.mark.asyncio
    async def test_usage_from_metrics_snapshot(self, controller: ClusterController, client: MagicMock) -> None:
        """Test a pod absent from the snapshot reports zero usage."""
        client.list_pods.return_value = [
            make_pod("pod-a", namespace="kube-system"),
            make_pod("pod-b", namespace="kube-system"),
        ]
        client.get_pod_metrics_snapshot.return_value = [
            make_pod_metrics("pod-a", namespace="kube-system", app=("150m", "104857600")),
        ]

        pods = await controller.fetch_pods(ResourceFilter(namespace="kube-system"), SortOrder.NAME)

        rendered = {p.name: (format_cpu(p.cpu), format_bytes(p.memory)) for p in pods}
        assert rendered == {"pod-a": ("150m", "100Mi"), "pod-b": ("0m", "0B")}
        client.list_pods.assert_awaited_once_with("kube-system", "")
        client.get_pod_metrics_snapshot.assert_awaited_once_with("kube-system")

    @pytest.mark.asyncio
    async def test_metrics_joined_by_namespace_and_name(
        self, controller: ClusterController, client: MagicMock
    ) -> None:
        client.list_pods.return_value = [make_pod("web", namespace="a"), make_pod("web", namespace="b")]
        client.get_pod_metrics_snapshot.return_value = [make_pod_metrics("web", namespace="b", app=("5m", "1Mi"))]

        pods = await controller.fetch_pods(ResourceFilter(), SortOrder.NAMESPACE)

        assert [(p.namespace, p.cpu) for p in pods] == [("a", 0), ("b", 5)]

    @pytest.mark.asyncio
    async def test_sort_by_restarts_descending(self, controller: ClusterController, client: MagicMock) -> None:
        def pod(name: str, restarts: int) -> dict:
            return make_pod(
                name,
                statuses=[{"name": "app", "ready": True, "restartCount": restarts, "state": {"running": {}}}],
            )

        client.list_pods.return_value = [pod("three", 3), pod("zero", 0), pod("seven", 7)]

        pods = await controller.fetch_pods(ResourceFilter(), SortOrder.RESTARTS_DESC)

        assert [p.restarts for p in pods] == [7, 3, 0]
        assert [p.name for p in pods] == ["seven", "three", "zero"]

    @pytest.mark.asyncio
    async def test_status_filter(self, controller: ClusterController, client: MagicMock) -> None:
        waiting = [{"name": "app", "state": {"waiting": {"reason": "Pending"}}}]
        client.list_pods.return_value = [make_pod("ok"), make_pod("stuck", statuses=waiting)]

        pods = await controller.fetch_pods(ResourceFilter(status=StatusRank.WAITING), SortOrder.NAME)

        assert [p.name for p in pods] == ["stuck"]

    @pytest.mark.asyncio
    async def test_node_filter(self, controller: ClusterController, client: MagicMock) -> None:
        """Test rows are re-checked against the node filter client side."""
        client.list_pods.return_value = [make_pod("p1", node="node-a"), make_pod("p2", node="node-b")]

        pods = await controller.fetch_pods(ResourceFilter(node="node-a"), SortOrder.NAME)

        assert [p.name for p in pods] == ["p1"]
        client.list_pods.assert_awaited_once_with("", "node-a")

    @pytest.mark.asyncio
    async def test_sort_is_stable(self, controller: ClusterController, client: MagicMock) -> None:
        client.list_pods.return_value = [
            make_pod("c", namespace="x"),
            make_pod("a", namespace="y"),
            make_pod("b", namespace="x"),
        ]

        pods = await controller.fetch_pods(ResourceFilter(), SortOrder.NAMESPACE)

        assert [p.name for p in pods] == ["c", "b", "a"]


class TestFetchPodDetail:
    """Tests for ClusterController.fetch_pod_detail."""

    @pytest.mark.asyncio
    async def test_logs_of_selected_container(self, controller: ClusterController, client: MagicMock) -> None:
        client.get_pod.return_value = make_pod(
            "web", containers=[make_container("app"), make_container("sidecar")]
        )
        client.get_logs.return_value = "a\nb\n"

        detail = await controller.fetch_pod_detail("web", "default", 1)

        client.get_logs.assert_awaited_once_with("default", "web", "sidecar", tail_lines=50)
        client.list_events.assert_awaited_once_with("default", involved_object_name="web")
        assert detail.log_lines == ["b", "a"]
        assert detail.selected_container == 1

    @pytest.mark.asyncio
    async def test_out_of_range_container(self, controller: ClusterController, client: MagicMock) -> None:
        client.get_pod.return_value = make_pod("web")

        detail = await controller.fetch_pod_detail("web", "default", 4)

        assert detail.selected_container == 0
        client.get_logs.assert_awaited_once_with("default", "web", "app", tail_lines=50)

    @pytest.mark.asyncio
    async def test_pod_without_containers(self, controller: ClusterController, client: MagicMock) -> None:
        client.get_pod.return_value = make_pod("web", containers=[])

        detail = await controller.fetch_pod_detail("web", "default", 0)

        client.get_logs.assert_not_awaited()
        assert detail.log_lines == []


class TestFetchEvents:
    """Tests for ClusterController.fetch_events and fetch_event_detail."""

    @pytest.mark.asyncio
    async def test_newest_first(self, controller: ClusterController, client: MagicMock) -> None:
        client.list_events.return_value = [
            make_event("1", "old", last="2024-01-01T00:00:00Z"),
            make_event("2", "new", last="2024-01-03T00:00:00Z"),
            make_event("3", "mid", last="2024-01-02T00:00:00Z"),
        ]

        events = await controller.fetch_events(ResourceFilter(), SortOrder.TIMESTAMP_DESC)

        assert [e.involved_name for e in events] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_type_filter(self, controller: ClusterController, client: MagicMock) -> None:
        client.list_events.return_value = [
            make_event("1", "a", event_type="Normal"),
            make_event("2", "b", event_type="Warning"),
        ]

        events = await controller.fetch_events(ResourceFilter(event_type="Warning"), SortOrder.NAME)

        assert [e.uid for e in events] == ["2"]
        client.list_events.assert_awaited_once_with("", event_type="Warning")

    @pytest.mark.asyncio
    async def test_event_detail(self, controller: ClusterController, client: MagicMock) -> None:
        client.get_event.return_value = make_event("9", "web")

        event = await controller.fetch_event_detail("web.9", "default")

        client.get_event.assert_awaited_once_with("default", "web.9")
        assert event.uid == "9"
