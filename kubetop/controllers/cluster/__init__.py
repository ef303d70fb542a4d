"""Cluster data access and aggregation."""

from kubetop.controllers.cluster.client import KubectlClient, resolve_kubeconfig
from kubetop.controllers.cluster.controller import ClusterController

__all__ = ["ClusterController", "KubectlClient", "resolve_kubeconfig"]
