"""Dashboard view components."""

from kubetop.screens.dashboard.components.base_view import BaseView, DrillTarget, TableView
from kubetop.screens.dashboard.components.event_details_view import EventDetailsView
from kubetop.screens.dashboard.components.events_view import EventsView
from kubetop.screens.dashboard.components.nodes_view import NodesView
from kubetop.screens.dashboard.components.pod_details_view import PodDetailsView
from kubetop.screens.dashboard.components.pods_view import PodsView

__all__ = [
    "BaseView",
    "DrillTarget",
    "EventDetailsView",
    "EventsView",
    "NodesView",
    "PodDetailsView",
    "PodsView",
    "TableView",
]
