"""Dashboard screen - hosts the active view, the selection overlay and the status bar.

Refreshes come from a periodic ticker and from transitions. Both run as
workers serialised by one lock around ``update()`` and the status redraw,
so a tick never rebuilds a view while a key-triggered refresh of it is in
flight. A tick that finds a refresh running is dropped.
"""

from __future__ import annotations

import asyncio
import logging

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.timer import Timer

from kubetop.constants.enums import ListType, ViewType
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.controllers.errors import KubetopError
from kubetop.keyboard import DASHBOARD_SCREEN_BINDINGS
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.models.state.app_settings import AppSettings
from kubetop.screens.base_screen import BaseScreen
from kubetop.screens.dashboard.components import BaseView
from kubetop.screens.dashboard.config import SelectionListConfig
from kubetop.screens.dashboard.navigator import MOVES, Navigator
from kubetop.widgets.selection import SelectionOverlay
from kubetop.widgets.structure import StatusBar

logger = logging.getLogger(__name__)


class DashboardScreen(BaseScreen):
    """Single screen of the dashboard; all navigation happens in place."""

    BINDINGS = DASHBOARD_SCREEN_BINDINGS

    def __init__(
        self,
        controller: ClusterController,
        settings: AppSettings,
        initial_view: ViewType,
        initial_filter: ResourceFilter | None = None,
    ) -> None:
        super().__init__()
        self.controller = controller
        self.settings = settings
        self.overlay = SelectionOverlay(SelectionListConfig(), controller, id="selection-overlay")
        self.status_bar = StatusBar(id="status-bar")
        self.navigator = Navigator(controller, self.overlay, initial_view, initial_filter)

        self._refresh_lock = asyncio.Lock()
        self._ticker: Timer | None = None
        self._mounted_view: BaseView | None = self.navigator.view
        self._previous_key: str | None = None

    def compose(self) -> ComposeResult:
        yield Container(self.navigator.view, id="view-host")
        yield self.overlay
        yield self.status_bar

    async def load_data(self) -> None:
        """Resolve the cluster name, then start the refresh ticker."""
        try:
            cluster = await self.controller.cluster_identity()
        except KubetopError as exc:
            logger.warning("Cannot resolve cluster identity: %s", exc)
            cluster = ""
        self.status_bar.set_cluster(cluster)
        self._sync_status_bar()
        self._ticker = self.set_interval(self.settings.refresh_interval, self._on_tick)
        self.request_refresh()

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def _on_tick(self) -> None:
        self.request_refresh(from_tick=True)

    def request_refresh(self, *, from_tick: bool = False) -> None:
        """Schedule a refresh of the active view."""
        if from_tick and self._refresh_lock.locked():
            logger.debug("Refresh still in flight, skipping tick")
            return
        self.run_worker(self._refresh_active_view(), name="refresh-view", group="refresh")

    async def _refresh_active_view(self) -> None:
        async with self._refresh_lock:
            view = self.navigator.view
            try:
                await view.update()
            except KubetopError as exc:
                self._handle_fetch_error(view, exc)
                return
            if self.status_bar.error is not None:
                self.status_bar.set_error(None)
            self._sync_status_bar()

    def _handle_fetch_error(self, view: BaseView, exc: KubetopError) -> None:
        logger.error("Refreshing the %s view failed: %s", view.view_type.value, exc)
        if self.settings.exit_on_fetch_error:
            if self._ticker is not None:
                self._ticker.stop()
            self.app.exit(return_code=1, message=f"kubetop: {exc}")
            return
        self.status_bar.set_error(str(exc))

    def _sync_status_bar(self) -> None:
        view = self.navigator.view
        self.status_bar.set_state(view.view_type, view.sort_by, view.resource_filter, view.paused)

    async def _after_transition(self, changed: bool) -> None:
        """Mount a replaced view and refresh after a state change."""
        if not changed:
            return
        view = self.navigator.view
        if view is not self._mounted_view:
            host = self.query_one("#view-host", Container)
            await host.remove_children()
            await host.mount(view)
            self._mounted_view = view
        self._sync_status_bar()
        self.request_refresh()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_move(self, operation: str) -> None:
        if operation in MOVES:
            self.navigator.move(operation)

    def action_toggle_pause(self) -> None:
        self.navigator.toggle_pause()
        self._sync_status_bar()
        self.request_refresh()

    async def action_confirm(self) -> None:
        await self._after_transition(self.navigator.confirm())

    async def action_back(self) -> None:
        await self._after_transition(self.navigator.back())

    async def action_open_list(self, list_type: str) -> None:
        self.overlay.center_in(self.size.width, self.size.height)
        await self.navigator.open_list(ListType(list_type))

    async def action_open_filter(self) -> None:
        """F4 filters pods by status and events by type."""
        if self.navigator.view_type is ViewType.EVENTS:
            await self.action_open_list(ListType.EVENT_TYPE.value)
        else:
            await self.action_open_list(ListType.STATUS.value)

    def action_tab_next(self) -> None:
        if self.navigator.tab_next():
            self.request_refresh()

    def action_tab_prev(self) -> None:
        if self.navigator.tab_prev():
            self.request_refresh()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_resize(self, event: events.Resize) -> None:
        self.overlay.center_in(event.size.width, event.size.height)

    def on_key(self, event: events.Key) -> None:
        if event.key == "g":
            if self._previous_key == "g":
                self.navigator.move("top")
                self._previous_key = None
            else:
                self._previous_key = "g"
            event.stop()
            return
        self._previous_key = event.key

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        self.navigator.move("prev")
        event.stop()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        self.navigator.move("next")
        event.stop()
