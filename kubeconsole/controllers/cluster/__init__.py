"""Init file for cluster module."""

from kubeconsole.controllers.cluster.controller import ClusterCommandError, ClusterController
from kubeconsole.controllers.cluster.fetchers import NodeFetcher
from kubeconsole.controllers.cluster.parsers import MetricsParser, NodeParser

__all__ = [
    "ClusterCommandError",
    "ClusterController",
    "MetricsParser",
    "NodeFetcher",
    "NodeParser",
]
