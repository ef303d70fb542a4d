"""Controllers for kubetop data operations."""

from kubetop.controllers.cluster import ClusterController, KubectlClient
from kubetop.controllers.errors import (
    ClusterError,
    ClusterInconsistencyError,
    ConfigurationError,
    KubectlError,
    KubetopError,
)

__all__ = [
    "ClusterController",
    "ClusterError",
    "ClusterInconsistencyError",
    "ConfigurationError",
    "KubectlClient",
    "KubectlError",
    "KubetopError",
]
