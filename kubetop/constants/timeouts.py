"""Timeout constants for the TUI.

All timeout and interval values for API requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "10s"

# Process-level command timeout (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 15

# ============================================================================
# Refresh cycle (float, in seconds)
# ============================================================================

REFRESH_INTERVAL: Final = 2.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "REFRESH_INTERVAL",
]
