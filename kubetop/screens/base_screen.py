"""Base screen class for the kubetop TUI.

Screens set the window title on mount and then load their data once the
first frame is drawn. Subclasses implement ``load_data``.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, cast

from textual.screen import Screen

from kubetop.constants.values import APP_TITLE

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from kubetop.app import KubetopApp


class BaseScreen(Screen):
    """Abstract base class for TUI screens.

    Subclasses must implement:
    - screen_title: The title to display in the window
    - load_data: Async method to load screen data
    """

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> KubetopApp:
        """Get the application instance."""
        return cast("KubetopApp", super().app)

    def set_title(self, title: str) -> None:
        self.app.title = title if title == APP_TITLE else f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule data loading."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    def on_unmount(self) -> None:
        """Cancel running workers when the screen is removed."""
        self.workers.cancel_all()

    @abstractmethod
    async def load_data(self) -> None:
        """Load data for the screen.

        This method is called after the screen is mounted.
        """
        ...
