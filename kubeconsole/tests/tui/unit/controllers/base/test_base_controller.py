"""Tests for base controller module."""

from __future__ import annotations

from typing import Any

import pytest

from kubeconsole.controllers.base.base_controller import (
    UNREACHABLE_MESSAGE,
    BaseController,
    WorkerResult,
)
from kubeconsole.models.core.cluster_info import Cluster


class StubController(BaseController):
    """Controller with scripted connection and fetch results."""

    def __init__(self, connected: bool = True, fetch_error: Exception | None = None) -> None:
        super().__init__()
        self.connected = connected
        self.fetch_error = fetch_error

    def current_cluster(self) -> Cluster:
        return Cluster(id="stub", name="stub")

    async def check_connection(self) -> bool:
        return self.connected

    async def fetch_all(self) -> dict[str, Any]:
        if self.fetch_error is not None:
            raise self.fetch_error
        return {"nodes": [], "nodes_metrics": {}}

    async def delete_node(self, project_id: str, cluster_id: str, node_id: str) -> None:
        return None


class TestWorkerResult:
    """Tests for WorkerResult dataclass."""

    def test_worker_result_success(self) -> None:
        """Test successful worker result."""
        result = WorkerResult(success=True, data={"nodes": []}, duration_ms=100.0)
        assert result.success is True
        assert result.data == {"nodes": []}
        assert result.error is None
        assert result.duration_ms == 100.0

    def test_worker_result_defaults(self) -> None:
        """Test WorkerResult default values."""
        result = WorkerResult(success=False)
        assert result.data is None
        assert result.error is None
        assert result.duration_ms == 0.0


class TestBaseController:
    """Tests for BaseController."""

    def test_base_controller_is_abstract(self) -> None:
        """Test that BaseController cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseController()  # type: ignore[abstract]

    @pytest.mark.asyncio
    async def test_load_success(self) -> None:
        controller = StubController()

        result = await controller.load()

        assert result.success is True
        assert result.data == {"nodes": [], "nodes_metrics": {}}
        assert result.duration_ms >= 0.0
        assert controller._load_start_time is None

    @pytest.mark.asyncio
    async def test_load_unreachable(self) -> None:
        result = await StubController(connected=False).load()

        assert result.success is False
        assert result.error == UNREACHABLE_MESSAGE
        assert result.data is None

    @pytest.mark.asyncio
    async def test_load_reports_fetch_errors(self) -> None:
        result = await StubController(fetch_error=RuntimeError("kubectl timed out")).load()

        assert result.success is False
        assert result.error == "kubectl timed out"

    @pytest.mark.asyncio
    async def test_load_propagates_unexpected_errors(self) -> None:
        with pytest.raises(KeyError):
            await StubController(fetch_error=KeyError("nodes")).load()
