"""Main application class for the kubetop TUI."""

from __future__ import annotations

import asyncio
import logging
import signal
from contextlib import suppress

from textual.app import App
from textual.binding import Binding

from kubetop.constants import APP_TITLE
from kubetop.constants.enums import ViewType
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.keyboard.app import APP_BINDINGS
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.models.state.app_settings import AppSettings
from kubetop.screens.dashboard import DashboardScreen

logger = logging.getLogger(__name__)


class KubetopApp(App[None]):
    """Main TUI application for kubetop."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        controller: ClusterController,
        settings: AppSettings | None = None,
        initial_view: ViewType | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.controller = controller
        self.settings = settings or AppSettings()
        self.initial_view = initial_view or ViewType(self.settings.default_view)

    def on_mount(self) -> None:
        with suppress(NotImplementedError, RuntimeError):
            asyncio.get_running_loop().add_signal_handler(signal.SIGTERM, self._on_terminate)
        self.push_screen(
            DashboardScreen(
                self.controller,
                self.settings,
                self.initial_view,
                ResourceFilter(namespace=self.settings.namespace),
            )
        )

    def _on_terminate(self) -> None:
        logger.info("SIGTERM received, exiting")
        self.exit()
