"""SelectionOverlay - the list picked from to sort, filter or switch views.

The overlay is populated on show, either from static enumerations or from
a live query, and maps the cursor back to a value on confirm. Visibility is
its only state.

CSS Classes: widget-selection-overlay
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from textual.app import ComposeResult

from kubetop.constants.enums import ListType, SortOrder, ViewType
from kubetop.constants.limits import OVERLAY_HEIGHT, OVERLAY_WIDTH
from kubetop.constants.values import ALL_VALUES, LIST_ROW_FORMAT
from kubetop.controllers.errors import KubetopError
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.widgets._base import BaseWidget
from kubetop.widgets.data.tables import ColumnSpec, ScrollTable

if TYPE_CHECKING:
    from kubetop.screens.dashboard.config import SelectionListConfig

logger = logging.getLogger(__name__)


class SelectionSource(Protocol):
    """Live queries backing the namespace and node lists."""

    async def list_namespaces(self) -> list[str]: ...

    async def list_node_names(self) -> list[str]: ...


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of confirming the overlay."""

    view_type: ViewType
    sort_order: SortOrder
    resource_filter: ResourceFilter


class SelectionOverlay(BaseWidget):
    """Overlay list shown above the active view."""

    _default_classes: ClassVar[str] = "widget-selection-overlay"

    def __init__(self, config: SelectionListConfig, source: SelectionSource, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.source = source
        self.list_type: ListType | None = None
        self._values: list[Any] = []
        self.table = ScrollTable(
            [ColumnSpec("", 20, elastic=True)],
            show_header=False,
            id="selection-table",
        )
        self.display = False

    def compose(self) -> ComposeResult:
        yield self.table

    @property
    def is_shown(self) -> bool:
        return bool(self.display)

    async def _choices(self, view_type: ViewType, list_type: ListType) -> list[tuple[str, Any]]:
        if list_type is ListType.SORT:
            return [(order.value, order) for order in self.config.sort_orders.get(view_type, ())]
        if list_type is ListType.STATUS:
            return list(self.config.statuses)
        if list_type is ListType.EVENT_TYPE:
            return list(self.config.event_types)
        if list_type is ListType.VIEW:
            return [(view.value, view) for view in self.config.views]

        try:
            if list_type is ListType.NAMESPACE:
                names = await self.source.list_namespaces()
            else:
                names = await self.source.list_node_names()
        except KubetopError as exc:
            logger.warning("Cannot populate %s list: %s", list_type.value, exc)
            return []
        return [(ALL_VALUES, "")] + [(name, name) for name in names]

    async def show(self, view_type: ViewType, list_type: ListType) -> bool:
        """Populate and show the list.

        Returns:
            False (and stay hidden) when the view does not offer the list.
        """
        if not self.config.allows(view_type, list_type):
            self.hide()
            return False

        choices = await self._choices(view_type, list_type)
        self.list_type = list_type
        self._values = [value for _, value in choices]
        self.table.set_rows(
            [[LIST_ROW_FORMAT.format(index=index, value=label)] for index, (label, _) in enumerate(choices)]
        )
        self.table.reset_cursor()
        self.border_title = self.config.titles.get(list_type, "")
        self.display = True
        return True

    def center_in(self, width: int, height: int) -> None:
        """Offset the docked overlay so it sits in the middle of a width x height area."""
        self.styles.offset = (
            max(0, (width - OVERLAY_WIDTH) // 2),
            max(0, (height - OVERLAY_HEIGHT) // 2),
        )

    def hide(self) -> None:
        self.display = False
        self.list_type = None

    def selected(
        self,
        view_type: ViewType,
        sort_order: SortOrder,
        resource_filter: ResourceFilter,
    ) -> SelectionResult:
        """Apply the highlighted value to the given state and hide.

        A namespace, node or event type of "" and a status of None reset
        that filter to "all".
        """
        list_type = self.list_type
        result = SelectionResult(view_type, sort_order, resource_filter)
        if list_type is not None and self._values:
            value = self._values[self.table.selected_row]
            if list_type is ListType.SORT:
                result = SelectionResult(view_type, value, resource_filter)
            elif list_type is ListType.VIEW:
                result = SelectionResult(value, sort_order, resource_filter)
            else:
                field_name = {
                    ListType.NAMESPACE: "namespace",
                    ListType.NODE: "node",
                    ListType.STATUS: "status",
                    ListType.EVENT_TYPE: "event_type",
                }[list_type]
                result = SelectionResult(
                    view_type,
                    sort_order,
                    resource_filter.model_copy(update={field_name: value}),
                )
        self.hide()
        return result

    def move_up(self) -> None:
        self.table.move_up()

    def move_down(self) -> None:
        self.table.move_down()

    def move_top(self) -> None:
        self.table.move_top()

    def move_bottom(self) -> None:
        self.table.move_bottom()

    def move_half_page_up(self) -> None:
        self.table.move_half_page_up()

    def move_half_page_down(self) -> None:
        self.table.move_half_page_down()

    def move_page_up(self) -> None:
        self.table.move_page_up()

    def move_page_down(self) -> None:
        self.table.move_page_down()
