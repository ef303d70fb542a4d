"""Constants module for kubetop.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, styles with Final)
- timeouts.py: Timeout and interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in kubetop.keyboard module.
"""

from kubetop.constants.defaults import (
    CONFIG_PATH_DEFAULT,
    DEFAULT_SORT_ORDERS,
    DEFAULT_VIEW,
    KUBECONFIG_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
)
from kubetop.constants.enums import (
    EventType,
    ListType,
    SortOrder,
    StatusRank,
    ViewType,
)
from kubetop.constants.limits import (
    DETAIL_HEADER_MIN_HEIGHT,
    LOG_TAIL_LINES,
    MAX_POD_EVENTS,
    OVERLAY_HEIGHT,
    OVERLAY_WIDTH,
    REFRESH_INTERVAL_MIN,
)
from kubetop.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    REFRESH_INTERVAL,
)
from kubetop.constants.values import (
    ALL_VALUES,
    APP_TITLE,
    CURSOR_STYLE,
    ERROR_BANNER_STYLE,
    HEADER_STYLE,
    LIST_ROW_FORMAT,
    STATUS_BAR_STYLE,
    TIMESTAMP_FORMAT,
)

__all__ = [
    "ALL_VALUES",
    "APP_TITLE",
    "CLUSTER_REQUEST_TIMEOUT",
    "CONFIG_PATH_DEFAULT",
    "CURSOR_STYLE",
    "DEFAULT_SORT_ORDERS",
    "DEFAULT_VIEW",
    "DETAIL_HEADER_MIN_HEIGHT",
    "ERROR_BANNER_STYLE",
    "HEADER_STYLE",
    "KUBECONFIG_DEFAULT",
    "KUBECTL_COMMAND_TIMEOUT",
    "LIST_ROW_FORMAT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "LOG_TAIL_LINES",
    "MAX_POD_EVENTS",
    "OVERLAY_HEIGHT",
    "OVERLAY_WIDTH",
    "REFRESH_INTERVAL",
    "REFRESH_INTERVAL_MIN",
    "STATUS_BAR_STYLE",
    "TIMESTAMP_FORMAT",
    # Enums
    "EventType",
    "ListType",
    "SortOrder",
    "StatusRank",
    "ViewType",
]
