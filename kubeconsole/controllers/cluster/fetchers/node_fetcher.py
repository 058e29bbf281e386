"""Node fetcher for cluster controller - fetches raw node data from the cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubeconsole.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class NodeFetcher:
    """Fetches raw node and node-metrics output via kubectl."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def fetch_nodes_raw(self) -> list[dict[str, Any]]:
        """Fetch node objects as dictionaries."""
        output = await self._run_kubectl(
            ("get", "nodes", "-o", "json", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
        )
        if not output:
            return []
        try:
            payload = json.loads(output)
        except json.JSONDecodeError:
            logger.warning("kubectl returned invalid JSON for nodes")
            return []
        items = payload.get("items", []) if isinstance(payload, dict) else []
        return [item for item in items if isinstance(item, dict)]

    async def fetch_top_nodes_raw(self) -> str:
        """Fetch ``kubectl top nodes`` output.

        Metrics are optional: a missing metrics-server yields an empty string.
        """
        try:
            return await self._run_kubectl(
                ("top", "nodes", "--no-headers", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
            )
        except RuntimeError as e:
            logger.info("Node metrics unavailable: %s", e)
            return ""
