"""Parsers used by the cluster controller."""

from kubeconsole.controllers.cluster.parsers.metrics_parser import MetricsParser
from kubeconsole.controllers.cluster.parsers.node_parser import NodeParser

__all__ = ["MetricsParser", "NodeParser"]
