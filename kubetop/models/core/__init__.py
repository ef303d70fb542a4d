"""Core row and detail models."""

from kubetop.models.core.event_info import EventInfo
from kubetop.models.core.node_info import NodeInfo
from kubetop.models.core.pod_info import (
    ContainerInfo,
    OwnerReference,
    PodDetail,
    PodEventInfo,
    PodInfo,
)
from kubetop.models.core.resource_filter import ResourceFilter

__all__ = [
    "ContainerInfo",
    "EventInfo",
    "NodeInfo",
    "OwnerReference",
    "PodDetail",
    "PodEventInfo",
    "PodInfo",
    "ResourceFilter",
]
