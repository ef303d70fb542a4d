"""Exception hierarchy for cluster access and dashboard refreshes."""


class KubetopError(Exception):
    """Base exception for kubetop."""


class ConfigurationError(KubetopError):
    """No usable kubeconfig or no reachable cluster endpoint.

    Raised before the dashboard starts; the process exits.
    """


class ClusterError(KubetopError):
    """A query against the cluster failed during a refresh."""


class KubectlError(ClusterError):
    """kubectl exited non-zero, timed out, or printed undecodable output."""

    def __init__(self, message: str, args: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.command_args = args


class ClusterInconsistencyError(ClusterError):
    """A metrics snapshot references an object missing from the object listing."""


__all__ = [
    "ClusterError",
    "ClusterInconsistencyError",
    "ConfigurationError",
    "KubectlError",
    "KubetopError",
]
