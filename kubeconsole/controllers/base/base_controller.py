"""Base controller for cluster data sources.

Controllers expose a connectivity check and a bulk fetch. ``load`` combines
the two into a single timed call that screen workers can await.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from kubeconsole.models.core.cluster_info import Cluster

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Cluster unreachable"


@dataclass
class WorkerResult:
    """Outcome of a background load."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class BaseController(ABC):
    """Cluster data source used by the node list screen."""

    def __init__(self) -> None:
        self._load_start_time: float | None = None

    @abstractmethod
    def current_cluster(self) -> Cluster:
        """Return the cluster this controller talks to."""
        ...

    @abstractmethod
    async def check_connection(self) -> bool:
        """Return True if the API server answers."""
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch nodes and node metrics."""
        ...

    @abstractmethod
    async def delete_node(self, project_id: str, cluster_id: str, node_id: str) -> None:
        ...

    async def load(self) -> WorkerResult:
        """Check the connection and fetch everything in one call.

        Command failures are reported in the result instead of raised.
        """
        self._load_start_time = time.monotonic()
        try:
            if not await self.check_connection():
                return self._finish(WorkerResult(success=False, error=UNREACHABLE_MESSAGE))
            data = await self.fetch_all()
        except RuntimeError as e:
            logger.warning("Cluster load failed: %s", e)
            return self._finish(WorkerResult(success=False, error=str(e)))
        return self._finish(WorkerResult(success=True, data=data))

    def _finish(self, result: WorkerResult) -> WorkerResult:
        if self._load_start_time is not None:
            result.duration_ms = (time.monotonic() - self._load_start_time) * 1000
            self._load_start_time = None
        logger.debug(
            "Cluster load finished in %.0f ms (success=%s)", result.duration_ms, result.success
        )
        return result
