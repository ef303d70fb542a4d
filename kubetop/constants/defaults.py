"""Default values for settings."""

from pathlib import Path
from typing import Final

from kubetop.constants.enums import SortOrder, ViewType

DEFAULT_VIEW: Final = ViewType.PODS
LOG_LEVEL_DEFAULT: Final = "WARNING"

CONFIG_PATH_DEFAULT: Final = Path.home() / ".config" / "kubetop" / "config.yaml"
LOG_FILE_DEFAULT: Final = Path.home() / ".cache" / "kubetop" / "kubetop.log"
KUBECONFIG_DEFAULT: Final = Path.home() / ".kube" / "config"

DEFAULT_SORT_ORDERS: Final[dict[ViewType, SortOrder]] = {
    ViewType.NODES: SortOrder.NAME,
    ViewType.PODS: SortOrder.NAMESPACE,
    ViewType.EVENTS: SortOrder.TIMESTAMP_DESC,
}

__all__ = [
    "CONFIG_PATH_DEFAULT",
    "DEFAULT_SORT_ORDERS",
    "DEFAULT_VIEW",
    "KUBECONFIG_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
]
