"""Event details view - every field of one event in a scrollable pane."""

from __future__ import annotations

from datetime import datetime

from textual.app import ComposeResult

from kubetop.constants.enums import SortOrder, ViewType
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.models.core.event_info import EventInfo
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.screens.dashboard.components.base_view import BaseView
from kubetop.utils.formatting import format_age, format_timestamp
from kubetop.widgets.display import ScrollPane


def describe_event(event: EventInfo, now: datetime) -> list[str]:
    return [
        f"UID:        {event.uid}",
        f"Name:       {event.involved_name}",
        f"Namespace:  {event.namespace}",
        f"Node:       {event.node}",
        f"Age:        {format_age(event.last_seen, now)}",
        f"First Time: {format_timestamp(event.first_seen)}",
        f"Last Time:  {format_timestamp(event.last_seen)}",
        f"Count:      {event.count}",
        f"Type:       {event.type}",
        f"Kind:       {event.involved_kind}",
        f"Reason:     {event.reason}",
        f"Source:     {event.source}",
        f"Message:    {event.message}",
    ]


class EventDetailsView(BaseView):
    view_type = ViewType.EVENT_DETAILS

    def __init__(
        self,
        controller: ClusterController,
        resource_filter: ResourceFilter,
        sort_order: SortOrder,
        *,
        name: str,
        namespace: str,
        **kwargs,
    ) -> None:
        super().__init__(controller, resource_filter, sort_order, **kwargs)
        self.event_name = name
        self.event_namespace = namespace
        self.event: EventInfo | None = None
        self.pane = ScrollPane(id="event-details")

    def compose(self) -> ComposeResult:
        yield self.pane

    async def refresh_data(self) -> None:
        self.event = await self.controller.fetch_event_detail(self.event_name, self.event_namespace)
        self.pane.set_lines(describe_event(self.event, self.now()))

    def selected_values(self) -> list[str]:
        return [self.event_name, self.event_namespace]

    def select_next(self) -> None:
        self.pane.move_down()

    def select_prev(self) -> None:
        self.pane.move_up()

    def select_top(self) -> None:
        self.pane.move_top()

    def select_bottom(self) -> None:
        self.pane.move_bottom()

    def select_half_page_down(self) -> None:
        self.pane.move_half_page_down()

    def select_half_page_up(self) -> None:
        self.pane.move_half_page_up()

    def select_page_down(self) -> None:
        self.pane.move_page_down()

    def select_page_up(self) -> None:
        self.pane.move_page_up()
