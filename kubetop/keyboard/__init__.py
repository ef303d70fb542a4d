"""Keyboard bindings module.

This module provides all keyboard bindings for the kubetop TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (DASHBOARD_SCREEN_BINDINGS)
"""

from kubetop.keyboard.app import APP_BINDINGS
from kubetop.keyboard.navigation import DASHBOARD_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
]
