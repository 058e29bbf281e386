"""Metrics parser for cluster controller - parses ``kubectl top nodes`` output."""

from __future__ import annotations

import logging

from kubeconsole.models.core.metrics_info import NodeMetrics
from kubeconsole.utils.resource_parser import memory_str_to_bytes, parse_cpu

logger = logging.getLogger(__name__)


def _parse_percent(value: str) -> float | None:
    value = value.strip()
    if not value.endswith("%"):
        return None
    try:
        return float(value[:-1])
    except ValueError:
        return None


class MetricsParser:
    """Parses node metrics into NodeMetrics keyed by node name."""

    def parse_top_nodes(self, output: str) -> dict[str, NodeMetrics]:
        """Parse ``NAME CPU(cores) CPU% MEMORY(bytes) MEMORY%`` rows.

        Rows with ``<unknown>`` values or too few columns are skipped.
        """
        metrics: dict[str, NodeMetrics] = {}
        for line in output.splitlines():
            parts = line.split()
            if len(parts) < 5 or "<unknown>" in parts:
                continue
            name, cpu, cpu_pct, memory, memory_pct = parts[:5]
            metrics[name] = NodeMetrics(
                name=name,
                cpu_total_millicores=parse_cpu(cpu) * 1000,
                memory_total_bytes=memory_str_to_bytes(memory),
                cpu_percent=_parse_percent(cpu_pct),
                memory_percent=_parse_percent(memory_pct),
            )
        logger.debug("Parsed metrics for %d nodes", len(metrics))
        return metrics
