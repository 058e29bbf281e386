"""Tests for metrics parser."""

from __future__ import annotations

import pytest

from kubeconsole.controllers.cluster.parsers.metrics_parser import MetricsParser


class TestMetricsParser:
    """Tests for MetricsParser class."""

    @pytest.fixture
    def parser(self) -> MetricsParser:
        return MetricsParser()

    def test_parse_top_nodes(self, parser: MetricsParser) -> None:
        output = (
            "worker-1   250m   12%   2048Mi   26%\n"
            "worker-2   1      50%   1Gi      13%\n"
        )

        metrics = parser.parse_top_nodes(output)

        assert set(metrics) == {"worker-1", "worker-2"}
        assert metrics["worker-1"].cpu_total_millicores == 250.0
        assert metrics["worker-1"].memory_total_bytes == 2048 * 1024**2
        assert metrics["worker-1"].cpu_percent == 12.0
        assert metrics["worker-2"].cpu_total_millicores == 1000.0
        assert metrics["worker-2"].memory_percent == 13.0

    def test_parse_top_nodes_skips_unknown(self, parser: MetricsParser) -> None:
        output = "worker-1   <unknown>   <unknown>   <unknown>   <unknown>\n"
        assert parser.parse_top_nodes(output) == {}

    def test_parse_top_nodes_skips_short_rows(self, parser: MetricsParser) -> None:
        assert parser.parse_top_nodes("worker-1 250m\n\n") == {}

    def test_parse_top_nodes_empty(self, parser: MetricsParser) -> None:
        assert parser.parse_top_nodes("") == {}
