"""Base classes for the dashboard views.

Every view exposes the same capability set to the navigator: refresh,
sort/filter state, pause, the values under the cursor, and directional
selection. The navigator only looks at the concrete class when building a
view.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar

from textual.app import ComposeResult
from textual.containers import Container

from kubetop.constants.enums import SortOrder, ViewType
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.widgets.data.tables import ColumnSpec, ScrollTable


@dataclass(frozen=True)
class DrillTarget:
    """Where Enter on a row leads.

    List targets carry the filter they open with; detail targets name the
    object to show and inherit the current filter and sort.
    """

    view_type: ViewType
    resource_filter: ResourceFilter | None = None
    name: str = ""
    namespace: str = ""


class BaseView(Container):
    """A refreshable, navigable unit hosted by the dashboard screen."""

    view_type: ClassVar[ViewType]

    def __init__(
        self,
        controller: ClusterController,
        resource_filter: ResourceFilter,
        sort_order: SortOrder,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self._resource_filter = resource_filter
        self._sort_by = sort_order
        self._paused = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def resource_filter(self) -> ResourceFilter:
        return self._resource_filter

    @property
    def sort_by(self) -> SortOrder:
        return self._sort_by

    def set_sort_and_filter(self, sort_order: SortOrder, resource_filter: ResourceFilter) -> None:
        self._sort_by = sort_order
        self._resource_filter = resource_filter

    @property
    def paused(self) -> bool:
        return self._paused

    def toggle_pause(self) -> None:
        self._paused = not self._paused

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    async def update(self) -> None:
        """Re-run the view's query. Frozen while paused.

        Raises:
            ClusterError: the query failed; the view keeps its last rows.
        """
        if self._paused:
            return
        await self.refresh_data()

    @abstractmethod
    async def refresh_data(self) -> None:
        """Fetch and rebuild the view's rows or panes."""
        ...

    @abstractmethod
    def selected_values(self) -> list[str]:
        """Raw row fields under the cursor, used to build the next view."""
        ...

    def drill_target(self) -> DrillTarget | None:
        """Target of Enter on the current row, or None when there is none."""
        return None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_next(self) -> None: ...

    def select_prev(self) -> None: ...

    def select_top(self) -> None: ...

    def select_bottom(self) -> None: ...

    def select_half_page_down(self) -> None: ...

    def select_half_page_up(self) -> None: ...

    def select_page_down(self) -> None: ...

    def select_page_up(self) -> None: ...

    def tab_next(self) -> bool:
        return False

    def tab_prev(self) -> bool:
        return False


class TableView(BaseView):
    """A view backed by a single ScrollTable."""

    COLUMNS: ClassVar[Sequence[ColumnSpec]] = ()
    UNIQUE_COLUMN: ClassVar[int] = 0

    def __init__(
        self,
        controller: ClusterController,
        resource_filter: ResourceFilter,
        sort_order: SortOrder,
        **kwargs,
    ) -> None:
        super().__init__(controller, resource_filter, sort_order, **kwargs)
        self.table = ScrollTable(self.COLUMNS, unique_column=self.UNIQUE_COLUMN, classes="view-table")

    def compose(self) -> ComposeResult:
        yield self.table

    async def refresh_data(self) -> None:
        self.table.set_rows(await self.fetch_rows())

    @abstractmethod
    async def fetch_rows(self) -> list[list[str]]:
        ...

    def selected_values(self) -> list[str]:
        return self.table.selected_values()

    def select_next(self) -> None:
        self.table.move_down()

    def select_prev(self) -> None:
        self.table.move_up()

    def select_top(self) -> None:
        self.table.move_top()

    def select_bottom(self) -> None:
        self.table.move_bottom()

    def select_half_page_down(self) -> None:
        self.table.move_half_page_down()

    def select_half_page_up(self) -> None:
        self.table.move_half_page_up()

    def select_page_down(self) -> None:
        self.table.move_page_down()

    def select_page_up(self) -> None:
        self.table.move_page_up()
