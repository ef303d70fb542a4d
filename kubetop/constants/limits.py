"""Limit values for the TUI."""

from typing import Final

# ============================================================================
# Pod details
# ============================================================================

LOG_TAIL_LINES: Final = 100
MAX_POD_EVENTS: Final = 5
DETAIL_HEADER_MIN_HEIGHT: Final = 11

# ============================================================================
# Refresh
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 0.5

# ============================================================================
# Selection overlay
# ============================================================================

OVERLAY_WIDTH: Final = 50
OVERLAY_HEIGHT: Final = 20

__all__ = [
    "DETAIL_HEADER_MIN_HEIGHT",
    "LOG_TAIL_LINES",
    "MAX_POD_EVENTS",
    "OVERLAY_HEIGHT",
    "OVERLAY_WIDTH",
    "REFRESH_INTERVAL_MIN",
]
