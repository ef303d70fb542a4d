"""Parsers turning raw kubectl JSON into row models."""

from kubetop.controllers.cluster.parsers.event_parser import EventParser
from kubetop.controllers.cluster.parsers.node_parser import NodeParser
from kubetop.controllers.cluster.parsers.pod_parser import (
    PodParser,
    derive_container_status,
    derive_pod_status,
)

__all__ = [
    "EventParser",
    "NodeParser",
    "PodParser",
    "derive_container_status",
    "derive_pod_status",
]
