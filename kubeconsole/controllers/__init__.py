"""Controllers for cluster data operations."""

from kubeconsole.controllers.cluster import ClusterCommandError, ClusterController

__all__ = ["ClusterCommandError", "ClusterController"]
