"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, IntEnum

# =============================================================================
# View Enums
# =============================================================================

class ViewType(Enum):
    """Dashboard views the navigator can host."""

    PODS = "pods"
    NODES = "nodes"
    EVENTS = "events"
    POD_DETAILS = "pod_details"
    EVENT_DETAILS = "event_details"

    @property
    def is_detail(self) -> bool:
        return self in (ViewType.POD_DETAILS, ViewType.EVENT_DETAILS)


class ListType(Enum):
    """Selection lists that can be opened over a view."""

    SORT = "sort"
    NAMESPACE = "namespace"
    NODE = "node"
    STATUS = "status"
    EVENT_TYPE = "event_type"
    VIEW = "view"


# =============================================================================
# Resource Enums
# =============================================================================

class StatusRank(IntEnum):
    """Severity-ordered rank of a pod or container state."""

    TERMINATED = 0
    WAITING = 1
    RUNNING = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class EventType(Enum):
    """Kubernetes event type values."""

    NORMAL = "Normal"
    WARNING = "Warning"


# =============================================================================
# Sort Enums
# =============================================================================

class SortOrder(Enum):
    """Sort orders offered in the sort selection list.

    Values are the labels shown to the user.
    """

    CPU_ASC = "CPU (A)"
    CPU_DESC = "CPU (D)"
    MEMORY_ASC = "Memory (A)"
    MEMORY_DESC = "Memory (D)"
    NAME = "Name"
    NAMESPACE = "Namespace"
    PODS_ASC = "Pods (A)"
    PODS_DESC = "Pods (D)"
    RESTARTS_ASC = "Restarts (A)"
    RESTARTS_DESC = "Restarts (D)"
    STATUS = "Status"
    TIMESTAMP_ASC = "Timestamp (A)"
    TIMESTAMP_DESC = "Timestamp (D)"


__all__ = [
    "EventType",
    "ListType",
    "SortOrder",
    "StatusRank",
    "ViewType",
]
