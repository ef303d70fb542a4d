"""Navigator - the dashboard's view state machine.

States are the active view kind crossed with the overlay being hidden or
shown for one list type. The navigator owns the active view and the overlay
and performs every transition; the screen mounts whatever view it reports
and triggers a refresh after each transition that changed something.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kubetop.constants.defaults import DEFAULT_SORT_ORDERS
from kubetop.constants.enums import ListType, SortOrder, ViewType
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.screens.dashboard.components import (
    BaseView,
    EventDetailsView,
    EventsView,
    NodesView,
    PodDetailsView,
    PodsView,
)
from kubetop.widgets.selection import SelectionOverlay

logger = logging.getLogger(__name__)

_LIST_VIEWS: dict[ViewType, type[BaseView]] = {
    ViewType.NODES: NodesView,
    ViewType.PODS: PodsView,
    ViewType.EVENTS: EventsView,
}

_PARENT_VIEWS: dict[ViewType, ViewType] = {
    ViewType.POD_DETAILS: ViewType.PODS,
    ViewType.EVENT_DETAILS: ViewType.EVENTS,
}

# Cursor operations: view method, overlay method.
_MOVES: dict[str, tuple[str, str]] = {
    "next": ("select_next", "move_down"),
    "prev": ("select_prev", "move_up"),
    "top": ("select_top", "move_top"),
    "bottom": ("select_bottom", "move_bottom"),
    "half_page_down": ("select_half_page_down", "move_half_page_down"),
    "half_page_up": ("select_half_page_up", "move_half_page_up"),
    "page_down": ("select_page_down", "move_page_down"),
    "page_up": ("select_page_up", "move_page_up"),
}

MOVES = tuple(_MOVES)


@dataclass(frozen=True)
class _ParentState:
    view_type: ViewType
    resource_filter: ResourceFilter
    sort_order: SortOrder


def default_sort_order(view_type: ViewType) -> SortOrder:
    return DEFAULT_SORT_ORDERS.get(view_type, SortOrder.NAME)


class Navigator:
    """Owns the active view and the selection overlay."""

    def __init__(
        self,
        controller: ClusterController,
        overlay: SelectionOverlay,
        initial_view: ViewType,
        initial_filter: ResourceFilter | None = None,
    ) -> None:
        self.controller = controller
        self.overlay = overlay
        self._parent: _ParentState | None = None
        self.view = self.create_view(initial_view, initial_filter or ResourceFilter())

    @property
    def view_type(self) -> ViewType:
        return self.view.view_type

    @property
    def list_shown(self) -> bool:
        return self.overlay.is_shown

    def create_view(
        self,
        view_type: ViewType,
        resource_filter: ResourceFilter | None = None,
        sort_order: SortOrder | None = None,
        *,
        name: str = "",
        namespace: str = "",
    ) -> BaseView:
        """Build a fresh, live view of ``view_type``.

        Detail views need the ``name`` and ``namespace`` of their object.
        """
        resource_filter = resource_filter or ResourceFilter()
        sort_order = sort_order or default_sort_order(view_type)
        if view_type is ViewType.POD_DETAILS:
            return PodDetailsView(
                self.controller, resource_filter, sort_order, name=name, namespace=namespace
            )
        if view_type is ViewType.EVENT_DETAILS:
            return EventDetailsView(
                self.controller, resource_filter, sort_order, name=name, namespace=namespace
            )
        return _LIST_VIEWS[view_type](self.controller, resource_filter, sort_order)

    # ------------------------------------------------------------------
    # Overlay
    # ------------------------------------------------------------------

    async def open_list(self, list_type: ListType) -> bool:
        """Show the overlay for ``list_type`` if the active view offers it."""
        return await self.overlay.show(self.view_type, list_type)

    def confirm(self) -> bool:
        """Handle Enter.

        With the overlay shown, apply its selection; otherwise drill into
        the row under the cursor.

        Returns:
            True when the active view or its sort/filter changed.
        """
        if self.list_shown:
            return self._apply_selection()
        return self.drill_down()

    def _apply_selection(self) -> bool:
        view = self.view
        result = self.overlay.selected(view.view_type, view.sort_by, view.resource_filter)
        if result.view_type is not view.view_type:
            logger.debug("Switching view %s -> %s", view.view_type.value, result.view_type.value)
            self._parent = None
            self.view = self.create_view(result.view_type)
            return True
        if (result.sort_order, result.resource_filter) == (view.sort_by, view.resource_filter):
            return False
        view.set_sort_and_filter(result.sort_order, result.resource_filter)
        return True

    def drill_down(self) -> bool:
        """Open the target of the row under the cursor.

        Detail targets inherit the current filter and sort and remember the
        list view for Escape; list targets start fresh.
        """
        view = self.view
        target = view.drill_target()
        if target is None:
            return False

        if target.view_type in _PARENT_VIEWS:
            self._parent = _ParentState(view.view_type, view.resource_filter, view.sort_by)
            self.view = self.create_view(
                target.view_type,
                view.resource_filter,
                view.sort_by,
                name=target.name,
                namespace=target.namespace,
            )
        else:
            self._parent = None
            self.view = self.create_view(target.view_type, target.resource_filter)
        return True

    def back(self) -> bool:
        """Handle Escape: close the overlay, or leave a details view.

        Closing the overlay changes nothing else and returns False.
        """
        if self.list_shown:
            self.overlay.hide()
            return False
        parent_type = _PARENT_VIEWS.get(self.view_type)
        if parent_type is None:
            return False
        parent = self._parent or _ParentState(
            parent_type, ResourceFilter(), default_sort_order(parent_type)
        )
        self._parent = None
        self.view = self.create_view(parent.view_type, parent.resource_filter, parent.sort_order)
        return True

    # ------------------------------------------------------------------
    # Cursor and view state
    # ------------------------------------------------------------------

    def move(self, operation: str) -> None:
        """Move the overlay cursor when shown, else the active view's."""
        view_method, overlay_method = _MOVES[operation]
        if self.list_shown:
            getattr(self.overlay, overlay_method)()
        else:
            getattr(self.view, view_method)()

    def toggle_pause(self) -> None:
        self.view.toggle_pause()

    def tab_next(self) -> bool:
        """Switch to the next tab of the active view; True if it changed."""
        return not self.list_shown and self.view.tab_next()

    def tab_prev(self) -> bool:
        return not self.list_shown and self.view.tab_prev()
