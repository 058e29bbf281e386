"""Cluster controller for node operations.

This module runs kubectl for the node list: it lists nodes and node metrics,
checks connectivity, and deletes nodes or the machines backing them.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from typing import Any

from kubeconsole.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_DELETE_TIMEOUT,
)
from kubeconsole.controllers.base import BaseController
from kubeconsole.controllers.cluster.fetchers import NodeFetcher
from kubeconsole.controllers.cluster.parsers import MetricsParser, NodeParser
from kubeconsole.models.core.cluster_info import Cluster
from kubeconsole.models.core.metrics_info import NodeMetrics
from kubeconsole.models.core.node_info import Node

logger = logging.getLogger(__name__)

_MACHINE_RESOURCE = "machines.cluster.k8s.io"


class ClusterCommandError(RuntimeError):
    """Raised when a kubectl command fails or times out."""


class ClusterController(BaseController):
    """kubectl-backed cluster service for the node list."""

    def __init__(self, context: str | None = None):
        """Initialize the cluster controller.

        Args:
            context: Optional Kubernetes context name.
        """
        super().__init__()
        self.context = context

        # Node id -> how to delete it, refreshed on every fetch_nodes().
        self._machine_refs: dict[str, tuple[str, str]] = {}
        self._node_names: dict[str, str] = {}

        self._node_fetcher = NodeFetcher(self._run_kubectl)
        self._node_parser = NodeParser()
        self._metrics_parser = MetricsParser()

    @staticmethod
    def resolve_current_context(timeout_seconds: int = 8) -> str | None:
        """Return kubectl's current context, or None when unavailable."""
        try:
            result = subprocess.run(
                ["kubectl", "config", "current-context"],
                capture_output=True,
                text=True,
                timeout=timeout_seconds,
            )
        except (OSError, subprocess.TimeoutExpired):
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def current_cluster(self) -> Cluster:
        name = self.context or "current"
        return Cluster(id=name, name=name)

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        effective_timeout = timeout if timeout is not None else KUBECTL_COMMAND_TIMEOUT
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except subprocess.TimeoutExpired as e:
            raise ClusterCommandError(
                f"kubectl {' '.join(args[:2])} timed out after {effective_timeout}s"
            ) from e
        except OSError as e:
            raise ClusterCommandError(f"Cannot run kubectl: {e}") from e
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ClusterCommandError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...], timeout: int | None = None) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args, timeout)

    async def check_connection(self) -> bool:
        """Check if the API server answers within CLUSTER_CHECK_TIMEOUT."""
        try:
            await asyncio.wait_for(
                self._run_kubectl(
                    ("version", "-o", "json", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
                ),
                timeout=CLUSTER_CHECK_TIMEOUT,
            )
        except (ClusterCommandError, asyncio.TimeoutError) as e:
            logger.warning("Cluster connection check failed: %s", e)
            return False
        return True

    async def fetch_nodes(self) -> list[Node]:
        raw_nodes = await self._node_fetcher.fetch_nodes_raw()
        machine_refs: dict[str, tuple[str, str]] = {}
        node_names: dict[str, str] = {}
        nodes = self._node_parser.parse_nodes(raw_nodes)
        for raw in raw_nodes:
            ref = self._node_parser.machine_ref(raw)
            name = raw.get("metadata", {}).get("name", "")
            if ref is not None:
                machine_refs[ref[1]] = ref
            elif name:
                node_names[name] = name
        self._machine_refs = machine_refs
        self._node_names = node_names
        logger.debug("Fetched %d nodes (%d machine-backed)", len(nodes), len(machine_refs))
        return nodes

    async def fetch_node_metrics(self) -> dict[str, NodeMetrics]:
        output = await self._node_fetcher.fetch_top_nodes_raw()
        return self._metrics_parser.parse_top_nodes(output)

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch nodes and node metrics in parallel.

        Returns:
            Dictionary with ``nodes`` and ``nodes_metrics``.
        """
        nodes, metrics = await asyncio.gather(self.fetch_nodes(), self.fetch_node_metrics())
        return {"nodes": nodes, "nodes_metrics": metrics}

    def _delete_args(self, node_id: str) -> tuple[str, ...]:
        machine = self._machine_refs.get(node_id)
        if machine is not None:
            namespace, name = machine
            return ("delete", _MACHINE_RESOURCE, "-n", namespace, name, "--wait=false")
        return ("delete", "node", self._node_names.get(node_id, node_id), "--wait=false")

    async def delete_node(self, project_id: str, cluster_id: str, node_id: str) -> None:
        """Delete a node, or the machine backing it.

        Raises:
            ClusterCommandError: If the cluster is not the active context or
                kubectl fails.
        """
        if self.context and cluster_id != self.context:
            raise ClusterCommandError(
                f"Cluster {cluster_id!r} is not the active context {self.context!r}"
            )
        args = self._delete_args(node_id)
        logger.info(
            "Deleting node %s in project %s, cluster %s", node_id, project_id, cluster_id
        )
        await self._run_kubectl(args, timeout=KUBECTL_DELETE_TIMEOUT)
        self._machine_refs.pop(node_id, None)
        self._node_names.pop(node_id, None)
