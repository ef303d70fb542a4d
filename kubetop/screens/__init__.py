"""kubetop TUI screens.

Domain Structure:
    - dashboard/ - The single dashboard screen, its navigator and views

Note: Keybindings live in the keyboard/ package.
"""

from __future__ import annotations

from kubetop.screens.base_screen import BaseScreen
from kubetop.screens.dashboard import DashboardScreen

__all__ = [
    "BaseScreen",
    "DashboardScreen",
]
