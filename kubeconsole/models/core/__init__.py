"""Core domain models."""

from kubeconsole.models.core.cluster_info import Cluster, ClusterHealthStatus
from kubeconsole.models.core.member_info import GroupConfig, Member
from kubeconsole.models.core.metrics_info import NodeMetrics
from kubeconsole.models.core.node_info import (
    Node,
    NodeAddress,
    NodeCloudSpec,
    NodeHealthStatus,
    NodeResources,
    NodeSpec,
    NodeStatusInfo,
    NodeSystemInfo,
    NodeVersions,
    OperatingSystemSpec,
)

__all__ = [
    "Cluster",
    "ClusterHealthStatus",
    "GroupConfig",
    "Member",
    "Node",
    "NodeAddress",
    "NodeCloudSpec",
    "NodeHealthStatus",
    "NodeMetrics",
    "NodeResources",
    "NodeSpec",
    "NodeStatusInfo",
    "NodeSystemInfo",
    "NodeVersions",
    "OperatingSystemSpec",
]
