"""kubectl-backed cluster client.

Every call shells out to ``kubectl ... -o json`` in a worker thread and
returns decoded raw objects. No caching: each refresh sees fresh data.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import subprocess
from pathlib import Path
from typing import Any

from kubetop.constants.defaults import KUBECONFIG_DEFAULT
from kubetop.constants.limits import LOG_TAIL_LINES
from kubetop.constants.timeouts import CLUSTER_REQUEST_TIMEOUT, KUBECTL_COMMAND_TIMEOUT
from kubetop.controllers.errors import ConfigurationError, KubectlError

logger = logging.getLogger(__name__)

_METRICS_API = "/apis/metrics.k8s.io/v1beta1"


def resolve_kubeconfig(explicit: str | None = None) -> str:
    """Resolve the kubeconfig to use.

    The ``--kubeconfig`` flag wins, then ``$KUBECONFIG``, then
    ``~/.kube/config``.

    Raises:
        ConfigurationError: None of the candidates point at an existing file.
    """
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"kubeconfig not found: {path}")
        return str(path)

    env_value = os.environ.get("KUBECONFIG", "")
    if env_value:
        candidates = [Path(p).expanduser() for p in env_value.split(os.pathsep) if p]
        if not any(candidate.is_file() for candidate in candidates):
            raise ConfigurationError(f"KUBECONFIG points at no existing file: {env_value}")
        return env_value

    if not KUBECONFIG_DEFAULT.is_file():
        raise ConfigurationError(
            f"config not found: pass --kubeconfig, set KUBECONFIG or create {KUBECONFIG_DEFAULT}"
        )
    return str(KUBECONFIG_DEFAULT)


class KubectlClient:
    """Read-only Kubernetes API access through the kubectl binary."""

    def __init__(
        self,
        kubeconfig: str | None = None,
        context: str | None = None,
        *,
        kubectl: str = "kubectl",
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        command_timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            kubeconfig: Path (or KUBECONFIG-style path list) to use.
            context: Optional Kubernetes context name.
            kubectl: kubectl executable.
            request_timeout: Value passed to ``--request-timeout``.
            command_timeout: Process-level timeout in seconds.
        """
        self.kubeconfig = kubeconfig
        self.context = context
        self._kubectl = kubectl
        self._request_timeout = request_timeout
        self._command_timeout = command_timeout

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [self._kubectl]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        cmd.append(f"--request-timeout={self._request_timeout}")
        return cmd

    def _run_kubectl_sync(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args)
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self._command_timeout
            )
        except subprocess.TimeoutExpired as exc:
            raise KubectlError(
                f"kubectl {' '.join(args)} timed out after {self._command_timeout}s", args
            ) from exc
        except OSError as exc:
            raise KubectlError(f"cannot run {self._kubectl}: {exc}", args) from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlError(stderr or "kubectl command failed", args)
        return result.stdout

    async def _run_kubectl(self, *args: str) -> str:
        logger.debug("kubectl %s", " ".join(args))
        try:
            return await asyncio.to_thread(self._run_kubectl_sync, args)
        except KubectlError as exc:
            logger.warning("kubectl %s failed: %s", " ".join(args), exc)
            raise

    async def _get_json(self, *args: str) -> dict[str, Any]:
        output = await self._run_kubectl(*args)
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as exc:
            raise KubectlError(f"invalid JSON from kubectl {' '.join(args)}: {exc}", args) from exc
        if not isinstance(payload, dict):
            raise KubectlError(f"unexpected payload from kubectl {' '.join(args)}", args)
        return payload

    async def _get_items(self, *args: str) -> list[dict[str, Any]]:
        payload = await self._get_json(*args)
        return list(payload.get("items") or [])

    @staticmethod
    def _namespace_args(namespace: str) -> list[str]:
        return ["-n", namespace] if namespace else ["--all-namespaces"]

    # ------------------------------------------------------------------
    # Cluster
    # ------------------------------------------------------------------

    async def check_connection(self) -> bool:
        try:
            await self._run_kubectl("get", "--raw", "/version")
        except KubectlError:
            return False
        return True

    async def cluster_identity(self) -> str:
        """Return the API server URL of the current context.

        Falls back to the context name when the server is not set.
        """
        payload = await self._get_json("config", "view", "--minify", "-o", "json")
        clusters = payload.get("clusters") or []
        if clusters:
            server = (clusters[0].get("cluster") or {}).get("server", "")
            if server:
                return server
        return payload.get("current-context") or self.context or ""

    async def list_namespaces(self) -> list[str]:
        items = await self._get_items("get", "namespaces", "-o", "json")
        return [item.get("metadata", {}).get("name", "") for item in items]

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    async def list_nodes(self) -> list[dict[str, Any]]:
        return await self._get_items("get", "nodes", "-o", "json")

    async def get_node_metrics(self) -> list[dict[str, Any]]:
        return await self._get_items("get", "--raw", f"{_METRICS_API}/nodes")

    # ------------------------------------------------------------------
    # Pods
    # ------------------------------------------------------------------

    async def list_pods(self, namespace: str = "", node_name: str = "") -> list[dict[str, Any]]:
        """List pods, narrowed server side by namespace and node when given."""
        args = ["get", "pods", *self._namespace_args(namespace)]
        if node_name:
            args.append(f"--field-selector=spec.nodeName={node_name}")
        args.extend(["-o", "json"])
        return await self._get_items(*args)

    async def get_pod(self, namespace: str, name: str) -> dict[str, Any]:
        return await self._get_json("get", "pod", name, "-n", namespace, "-o", "json")

    async def get_pod_metrics_snapshot(self, namespace: str = "") -> list[dict[str, Any]]:
        if namespace:
            path = f"{_METRICS_API}/namespaces/{namespace}/pods"
        else:
            path = f"{_METRICS_API}/pods"
        return await self._get_items("get", "--raw", path)

    async def get_pod_metrics(self, namespace: str, name: str) -> dict[str, Any]:
        return await self._get_json(
            "get", "--raw", f"{_METRICS_API}/namespaces/{namespace}/pods/{name}"
        )

    async def get_logs(
        self,
        namespace: str,
        pod: str,
        container: str,
        tail_lines: int = LOG_TAIL_LINES,
    ) -> str:
        return await self._run_kubectl(
            "logs", pod, "-n", namespace, "-c", container, f"--tail={tail_lines}"
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def list_events(
        self,
        namespace: str = "",
        involved_object_name: str = "",
        event_type: str = "",
    ) -> list[dict[str, Any]]:
        args = ["get", "events", *self._namespace_args(namespace)]
        selectors = []
        if involved_object_name:
            selectors.append(f"involvedObject.name={involved_object_name}")
        if event_type:
            selectors.append(f"type={event_type}")
        if selectors:
            args.append(f"--field-selector={','.join(selectors)}")
        args.extend(["-o", "json"])
        return await self._get_items(*args)

    async def get_event(self, namespace: str, name: str) -> dict[str, Any]:
        return await self._get_json("get", "event", name, "-n", namespace, "-o", "json")
