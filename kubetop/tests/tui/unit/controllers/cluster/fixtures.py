"""Raw Kubernetes objects shared by the cluster controller tests."""

from __future__ import annotations

from typing import Any


def make_node(name: str, cpu: str = "4", memory: str = "8Gi", **addresses: str) -> dict[str, Any]:
    return {
        "metadata": {"name": name},
        "status": {
            "allocatable": {"cpu": cpu, "memory": memory},
            "addresses": [{"type": kind, "address": value} for kind, value in addresses.items()],
        },
    }


def make_node_metrics(name: str, cpu: str = "1", memory: str = "2Gi") -> dict[str, Any]:
    return {"metadata": {"name": name}, "usage": {"cpu": cpu, "memory": memory}}


def make_container(name: str, **limits: str) -> dict[str, Any]:
    container: dict[str, Any] = {"name": name}
    if limits:
        container["resources"] = {"limits": dict(limits)}
    return container


def make_pod(
    name: str,
    namespace: str = "default",
    node: str = "node-a",
    containers: list[dict[str, Any]] | None = None,
    statuses: list[dict[str, Any]] | None = None,
    created: str = "2024-01-01T00:00:00Z",
) -> dict[str, Any]:
    containers = containers if containers is not None else [make_container("app")]
    if statuses is None:
        statuses = [
            {"name": c["name"], "ready": True, "restartCount": 0, "state": {"running": {}}}
            for c in containers
        ]
    return {
        "metadata": {"name": name, "namespace": namespace, "creationTimestamp": created},
        "spec": {"nodeName": node, "containers": containers},
        "status": {"podIP": "10.0.0.1", "containerStatuses": statuses},
    }


def make_pod_metrics(name: str, namespace: str = "default", **usage: tuple[str, str]) -> dict[str, Any]:
    return {
        "metadata": {"name": name, "namespace": namespace},
        "containers": [
            {"name": container, "usage": {"cpu": cpu, "memory": memory}}
            for container, (cpu, memory) in usage.items()
        ],
    }


def make_event(
    uid: str,
    involved: str,
    namespace: str = "default",
    event_type: str = "Normal",
    last: str = "2024-01-01T00:00:00Z",
    message: str = "Pulled",
) -> dict[str, Any]:
    return {
        "metadata": {"uid": uid, "name": f"{involved}.{uid}", "namespace": namespace},
        "involvedObject": {"kind": "Pod", "name": involved, "namespace": namespace},
        "type": event_type,
        "reason": "Pulled",
        "source": {"component": "kubelet", "host": "node-a"},
        "message": message,
        "firstTimestamp": "2024-01-01T00:00:00Z",
        "lastTimestamp": last,
        "count": 3,
    }
