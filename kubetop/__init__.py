"""kubetop - a read-only terminal dashboard for Kubernetes resource usage."""

__version__ = "0.1.0"
