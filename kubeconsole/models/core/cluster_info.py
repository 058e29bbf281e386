"""Cluster data models."""

from __future__ import annotations

from pydantic import BaseModel

from kubeconsole.constants.enums import ClusterState


class Cluster(BaseModel):
    """Cluster the node list belongs to."""

    id: str
    name: str
    type: str = "kubernetes"

    @staticmethod
    def version_headline(cluster_type: str, is_kubelet: bool) -> str:
        """Return the column headline used for a version field."""
        if is_kubelet:
            return "kubelet Version"
        if cluster_type == "openshift":
            return "OpenShift Version"
        return "Master Version"


class ClusterHealthStatus(BaseModel):
    """Health of a cluster as seen by the console."""

    state: ClusterState
    message: str = ""

    @classmethod
    def for_connection(cls, connected: bool, message: str = "") -> ClusterHealthStatus:
        if connected:
            return cls(state=ClusterState.RUNNING, message=message)
        return cls(state=ClusterState.FAILED, message=message)

    @property
    def is_running(self) -> bool:
        return self.state == ClusterState.RUNNING

    @property
    def css_class(self) -> str:
        return f"km-status-{self.state.value.lower()}"
