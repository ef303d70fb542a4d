"""Pod details view - description, containers and a log tail for one pod."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from kubetop.constants.enums import SortOrder, ViewType
from kubetop.constants.limits import DETAIL_HEADER_MIN_HEIGHT, MAX_POD_EVENTS
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.models.core.pod_info import PodDetail
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.screens.dashboard.components.base_view import BaseView
from kubetop.screens.dashboard.config import CONTAINER_COLUMNS
from kubetop.utils.formatting import (
    format_bytes,
    format_cpu,
    format_timestamp,
    render_cpu_limit,
    render_memory_limit,
)
from kubetop.widgets.data.tables import ScrollTable
from kubetop.widgets.display import ScrollPane

_DESCRIPTION_FIELDS = 6
_HEADER_PADDING = 3
_SECTION_A_INDENT = " " * 15
_SECTION_B_INDENT = " " * 13


def _join_indented(values: list[str], indent: str) -> str:
    return ("\n" + indent).join(values)


def describe_pod(detail: PodDetail) -> str:
    """Left header: identity, owners and the most recent events."""
    events = [
        f"{format_timestamp(event.timestamp)}: {event.message}" for event in detail.events
    ]
    return "\n".join(
        [
            f"Name:          {detail.name}",
            f"Namespace:     {detail.namespace}",
            f"Node:          {detail.node_name}",
            f"Status:        {detail.status}",
            f"Start Time:    {format_timestamp(detail.created_at)}",
            f"IP:            {detail.ip}",
            f"Controlled By: {_join_indented([str(o) for o in detail.owners], _SECTION_A_INDENT)}",
            f"Events:        {_join_indented(events, _SECTION_A_INDENT)}",
        ]
    )


def describe_metadata(detail: PodDetail) -> str:
    """Right header: key-sorted labels and annotations."""
    return "\n".join(
        [
            f"Labels:      {_join_indented(detail.sorted_labels, _SECTION_B_INDENT)}",
            f"Annotations: {_join_indented(detail.sorted_annotations, _SECTION_B_INDENT)}",
        ]
    )


def header_height(detail: PodDetail, max_events: int = MAX_POD_EVENTS) -> int:
    """Rows reserved for the two header sections.

    Empty owner and event sections still take one line each.
    """
    section_a = (
        _DESCRIPTION_FIELDS
        + max(1, len(detail.owners))
        + max(1, min(len(detail.events), max_events))
    )
    section_b = len(detail.labels) + len(detail.annotations)
    return max(DETAIL_HEADER_MIN_HEIGHT, max(section_a, section_b) + _HEADER_PADDING)


def container_rows(detail: PodDetail) -> list[list[str]]:
    return [
        [
            container.name,
            str(container.restarts),
            container.status,
            format_cpu(container.cpu),
            render_cpu_limit(container.cpu_request, 1, 1),
            render_cpu_limit(container.cpu_limit, 1, 1),
            format_bytes(container.memory),
            render_memory_limit(container.memory_request, 1, 1),
            render_memory_limit(container.memory_limit, 1, 1),
        ]
        for container in detail.containers
    ]


class PodDetailsView(BaseView):
    """Details of one pod; Tab/Shift-Tab pick the container whose logs are shown."""

    view_type = ViewType.POD_DETAILS

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
        self.pod_name = name
        self.pod_namespace = namespace
        self.selected_container = 0
        self.detail: PodDetail | None = None

        self.description = Static("", id="pod-description", classes="detail-section")
        self.metadata = Static("", id="pod-metadata", classes="detail-section")
        self.header = Horizontal(self.description, self.metadata, id="pod-header")
        self.containers = ScrollTable(CONTAINER_COLUMNS, id="pod-containers")
        self.logs = ScrollPane("Logs", id="pod-logs")

    def compose(self) -> ComposeResult:
        yield self.header
        yield self.containers
        yield self.logs

    async def refresh_data(self) -> None:
        requested = self.selected_container
        detail = await self.controller.fetch_pod_detail(self.pod_name, self.pod_namespace, requested)
        self.apply_detail(detail, requested)

    def apply_detail(self, detail: PodDetail, requested: int | None = None) -> None:
        """Rebuild the header, container table and log pane from ``detail``.

        The container index follows ``detail`` only when the controller
        clamped ``requested``; a selection changed during the fetch is kept.
        """
        self.detail = detail
        if requested is None or detail.selected_container != requested:
            self.selected_container = detail.selected_container
        elif self.selected_container >= len(detail.containers):
            self.selected_container = max(0, len(detail.containers) - 1)

        self.description.update(describe_pod(detail))
        self.metadata.update(describe_metadata(detail))
        self.header.styles.height = header_height(detail, self.controller.max_pod_events)

        self.containers.set_rows(container_rows(detail))
        self.containers.select_row(self.selected_container)
        self.containers.styles.height = len(detail.containers) + 1

        self.logs.set_lines(detail.log_lines)

    def selected_values(self) -> list[str]:
        return [self.pod_name, self.pod_namespace]

    # Cursor keys scroll the log pane.

    def select_next(self) -> None:
        self.logs.move_down()

    def select_prev(self) -> None:
        self.logs.move_up()

    def select_top(self) -> None:
        self.logs.move_top()

    def select_bottom(self) -> None:
        self.logs.move_bottom()

    def select_half_page_down(self) -> None:
        self.logs.move_half_page_down()

    def select_half_page_up(self) -> None:
        self.logs.move_half_page_up()

    def select_page_down(self) -> None:
        self.logs.move_page_down()

    def select_page_up(self) -> None:
        self.logs.move_page_up()

    def _container_count(self) -> int:
        return len(self.detail.containers) if self.detail is not None else 0

    def tab_next(self) -> bool:
        """Select the next container, wrapping to the first after the last."""
        count = self._container_count()
        if count == 0:
            return False
        self.selected_container = (self.selected_container + 1) % count
        self.containers.select_row(self.selected_container)
        return True

    def tab_prev(self) -> bool:
        """Select the previous container, stopping at the first."""
        if self._container_count() == 0:
            return False
        self.selected_container = max(0, self.selected_container - 1)
        self.containers.select_row(self.selected_container)
        return True
