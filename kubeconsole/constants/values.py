"""Scalar constants for the console.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeConsole"

# ============================================================================
# Node naming
# ============================================================================

MACHINE_ID_PREFIX: Final = "machine-"
MACHINE_ANNOTATION: Final = "cluster.k8s.io/machine"

# CSS class of copy-to-clipboard controls; clicks on them never toggle a row.
COPY_CONTROL_CLASS: Final = "km-copy"

# ============================================================================
# Analytics
# ============================================================================

ANALYTICS_CATEGORY_CLUSTER_OVERVIEW: Final = "clusterOverview"
ANALYTICS_DELETE_NODE_DIALOG_OPENED: Final = "deleteNodeDialogOpened"
ANALYTICS_NODE_DELETED: Final = "nodeDeleted"

# ============================================================================
# Permissions
# ============================================================================

RESOURCE_NODES: Final = "nodes"
RESOURCE_MACHINE_DEPLOYMENTS: Final = "machineDeployments"
RESOURCE_CLUSTERS: Final = "clusters"

GROUP_OWNERS: Final = "owners"
GROUP_EDITORS: Final = "editors"
GROUP_VIEWERS: Final = "viewers"

# Group name -> resource kind -> allowed permissions
DEFAULT_GROUP_PERMISSIONS: Final[dict[str, dict[str, list[str]]]] = {
    GROUP_OWNERS: {
        RESOURCE_CLUSTERS: ["view", "create", "edit", "delete"],
        RESOURCE_NODES: ["view", "create", "edit", "delete"],
        RESOURCE_MACHINE_DEPLOYMENTS: ["view", "create", "edit", "delete"],
    },
    GROUP_EDITORS: {
        RESOURCE_CLUSTERS: ["view", "create", "edit", "delete"],
        RESOURCE_NODES: ["view", "create", "edit", "delete"],
        RESOURCE_MACHINE_DEPLOYMENTS: ["view", "create", "edit", "delete"],
    },
    GROUP_VIEWERS: {
        RESOURCE_CLUSTERS: ["view"],
        RESOURCE_NODES: ["view"],
        RESOURCE_MACHINE_DEPLOYMENTS: ["view"],
    },
}

# ============================================================================
# Health status (markup for rich text display)
# ============================================================================

RUNNING: Final = "[green]Running[/green]"
PROVISIONING: Final = "[yellow]Provisioning[/yellow]"
DELETING: Final = "[magenta]Deleting[/magenta]"
FAILED: Final = "[red]Failed[/red]"

__all__ = [
    "ANALYTICS_CATEGORY_CLUSTER_OVERVIEW",
    "ANALYTICS_DELETE_NODE_DIALOG_OPENED",
    "ANALYTICS_NODE_DELETED",
    "APP_TITLE",
    "COPY_CONTROL_CLASS",
    "DEFAULT_GROUP_PERMISSIONS",
    "DELETING",
    "FAILED",
    "GROUP_EDITORS",
    "GROUP_OWNERS",
    "GROUP_VIEWERS",
    "MACHINE_ANNOTATION",
    "MACHINE_ID_PREFIX",
    "PROVISIONING",
    "RESOURCE_CLUSTERS",
    "RESOURCE_MACHINE_DEPLOYMENTS",
    "RESOURCE_NODES",
    "RUNNING",
]
