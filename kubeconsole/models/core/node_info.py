"""Node data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kubeconsole.constants.enums import CloudProvider, NodeHealthState, OperatingSystem


class NodeVersions(BaseModel):
    """Versions of the software running on a node."""

    model_config = ConfigDict(populate_by_name=True)

    kubelet: str = ""


class NodeCloudSpec(BaseModel):
    """Provider-specific node spec; exactly one provider field is normally set."""

    model_config = ConfigDict(populate_by_name=True)

    aws: dict[str, Any] | None = None
    azure: dict[str, Any] | None = None
    gcp: dict[str, Any] | None = None
    openstack: dict[str, Any] | None = None
    vsphere: dict[str, Any] | None = None
    hetzner: dict[str, Any] | None = None
    digitalocean: dict[str, Any] | None = None

    @property
    def provider(self) -> CloudProvider | None:
        for provider in CloudProvider:
            if getattr(self, provider.value) is not None:
                return provider
        return None

    @property
    def tags(self) -> dict[str, str]:
        """Tags configured for the active provider, if any."""
        provider = self.provider
        if provider is None:
            return {}
        return dict(getattr(self, provider.value).get("tags") or {})


class OperatingSystemSpec(BaseModel):
    """Operating system the node image is built from."""

    model_config = ConfigDict(populate_by_name=True)

    ubuntu: dict[str, Any] | None = None
    centos: dict[str, Any] | None = None
    flatcar: dict[str, Any] | None = None
    rhel: dict[str, Any] | None = None
    sles: dict[str, Any] | None = None
    amzn2: dict[str, Any] | None = None
    rockylinux: dict[str, Any] | None = None

    @property
    def name(self) -> OperatingSystem | None:
        for operating_system in OperatingSystem:
            if getattr(self, operating_system.value) is not None:
                return operating_system
        return None


class NodeSpec(BaseModel):
    """Desired state of a node."""

    model_config = ConfigDict(populate_by_name=True)

    cloud: NodeCloudSpec = Field(default_factory=NodeCloudSpec)
    versions: NodeVersions = Field(default_factory=NodeVersions)
    operating_system: OperatingSystemSpec = Field(
        default_factory=OperatingSystemSpec, alias="operatingSystem"
    )


class NodeAddress(BaseModel):
    """Single node address as reported by the kubelet."""

    type: str
    address: str


class NodeResources(BaseModel):
    """Raw resource quantities (e.g. ``"2"``, ``"3882428Ki"``)."""

    cpu: str = ""
    memory: str = ""


class NodeSystemInfo(BaseModel):
    """System information reported by the kubelet."""

    model_config = ConfigDict(populate_by_name=True)

    kernel_version: str = Field(default="", alias="kernelVersion")
    kubelet_version: str = Field(default="", alias="kubeletVersion")
    os_image: str = Field(default="", alias="osImage")
    architecture: str = ""
    container_runtime_version: str = Field(default="", alias="containerRuntimeVersion")


class NodeStatusInfo(BaseModel):
    """Observed state of a node."""

    model_config = ConfigDict(populate_by_name=True)

    addresses: list[NodeAddress] = Field(default_factory=list)
    capacity: NodeResources = Field(default_factory=NodeResources)
    allocatable: NodeResources = Field(default_factory=NodeResources)
    node_info: NodeSystemInfo = Field(default_factory=NodeSystemInfo, alias="nodeInfo")
    error_reason: str = Field(default="", alias="errorReason")
    error_message: str = Field(default="", alias="errorMessage")


class Node(BaseModel):
    """Worker node of a cluster, as reported by the platform API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    creation_timestamp: datetime = Field(alias="creationTimestamp")
    deletion_timestamp: datetime | None = Field(default=None, alias="deletionTimestamp")
    spec: NodeSpec = Field(default_factory=NodeSpec)
    status: NodeStatusInfo = Field(default_factory=NodeStatusInfo)

    @property
    def kubelet_version(self) -> str:
        return self.spec.versions.kubelet


class NodeHealthStatus(BaseModel):
    """Health of a single node, derived from its spec and status."""

    state: NodeHealthState
    message: str = ""

    @classmethod
    def for_node(cls, node: Node) -> NodeHealthStatus:
        """Derive the health status of a node.

        Deletion wins over errors, errors win over a running kubelet, and a
        node whose kubelet has not reported yet is still provisioning.
        """
        if node.deletion_timestamp is not None:
            return cls(state=NodeHealthState.DELETING)
        if node.status.error_message or node.status.error_reason:
            return cls(
                state=NodeHealthState.FAILED,
                message=node.status.error_message or node.status.error_reason,
            )
        if node.status.node_info.kernel_version:
            return cls(state=NodeHealthState.RUNNING)
        return cls(state=NodeHealthState.PROVISIONING)

    @property
    def css_class(self) -> str:
        return f"km-status-{self.state.value.lower()}"
