"""Dashboard screen, its navigator and view components."""

from kubetop.screens.dashboard.dashboard_screen import DashboardScreen
from kubetop.screens.dashboard.navigator import Navigator

__all__ = ["DashboardScreen", "Navigator"]
