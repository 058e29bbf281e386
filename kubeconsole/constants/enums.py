"""All enum definitions for the console.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================

class NodeHealthState(Enum):
    """Derived lifecycle state of a node."""

    RUNNING = "Running"
    PROVISIONING = "Provisioning"
    DELETING = "Deleting"
    FAILED = "Failed"


class ClusterState(Enum):
    """Derived lifecycle state of a cluster."""

    RUNNING = "Running"
    PROVISIONING = "Provisioning"
    DELETING = "Deleting"
    FAILED = "Failed"


# =============================================================================
# Table Enums
# =============================================================================

class Column(Enum):
    """Node table columns."""

    STATE_ARROW = "stateArrow"
    STATUS = "status"
    NAME = "name"
    KUBELET_VERSION = "kubeletVersion"
    IP_ADDRESSES = "ipAddresses"
    CREATION_DATE = "creationDate"
    ACTIONS = "actions"


class ToggleableColumn(Enum):
    """Node table columns shown only for expanded rows."""

    NODE_DETAILS = "nodeDetails"


class SortField(Enum):
    """Node table columns that can be sorted."""

    NAME = "name"
    KUBELET_VERSION = "kubeletVersion"
    CREATION_DATE = "creationDate"
    NONE = ""


class SortDirection(Enum):
    """Sort direction of the node table."""

    ASCENDING = "asc"
    DESCENDING = "desc"
    NONE = ""


# =============================================================================
# Permission Enums
# =============================================================================

class Permission(Enum):
    """Actions a group may be allowed to perform on a resource kind."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


# =============================================================================
# Provider Enums
# =============================================================================

class CloudProvider(Enum):
    """Cloud providers a node can be scheduled on."""

    AWS = "aws"
    AZURE = "azure"
    GCP = "gcp"
    OPENSTACK = "openstack"
    VSPHERE = "vsphere"
    HETZNER = "hetzner"
    DIGITALOCEAN = "digitalocean"


class OperatingSystem(Enum):
    """Operating systems a node image can be built from."""

    UBUNTU = "ubuntu"
    CENTOS = "centos"
    FLATCAR = "flatcar"
    RHEL = "rhel"
    SLES = "sles"
    AMZN2 = "amzn2"
    ROCKYLINUX = "rockylinux"


class NotificationSeverity(Enum):
    """Severity passed to Textual's toast notifications."""

    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


__all__ = [
    "CloudProvider",
    "ClusterState",
    "Column",
    "NodeHealthState",
    "NotificationSeverity",
    "OperatingSystem",
    "Permission",
    "SortDirection",
    "SortField",
    "ToggleableColumn",
]
