"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "kubetop"

# ============================================================================
# Styles (rich style strings)
# ============================================================================

HEADER_STYLE: Final = "bold black on green"
CURSOR_STYLE: Final = "black on cyan"
STATUS_BAR_STYLE: Final = "black on green"
ERROR_BANNER_STYLE: Final = "bold white on red"

# ============================================================================
# Placeholders
# ============================================================================

ALL_VALUES: Final = "-"
LIST_ROW_FORMAT: Final = "[{index}] {value}"

# ============================================================================
# Pod details
# ============================================================================

TIMESTAMP_FORMAT: Final = "%a, %d %b %Y %H:%M:%S %z"

__all__ = [
    "ALL_VALUES",
    "APP_TITLE",
    "CURSOR_STYLE",
    "ERROR_BANNER_STYLE",
    "HEADER_STYLE",
    "LIST_ROW_FORMAT",
    "STATUS_BAR_STYLE",
    "TIMESTAMP_FORMAT",
]
