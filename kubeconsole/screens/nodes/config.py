"""Node list configuration - column definitions, widget IDs, and dialog text."""

from __future__ import annotations

from kubeconsole.constants.enums import Column, SortField

# =============================================================================
# Table Column Definitions: list[tuple[str, str, int]] = [(key, label, width), ...]
# =============================================================================

NODE_TABLE_COLUMNS: list[tuple[str, str, int]] = [
    (Column.STATE_ARROW.value, "", 2),
    (Column.STATUS.value, "Status", 14),
    (Column.NAME.value, "Name", 36),
    (Column.KUBELET_VERSION.value, "kubelet Version", 18),
    (Column.IP_ADDRESSES.value, "IP Addresses", 32),
    (Column.CREATION_DATE.value, "Created", 20),
    (Column.ACTIONS.value, "", 8),
]

# Header click -> sort field. Columns not listed here are not sortable.
SORTABLE_COLUMNS: dict[str, SortField] = {
    Column.NAME.value: SortField.NAME,
    Column.KUBELET_VERSION.value: SortField.KUBELET_VERSION,
    Column.CREATION_DATE.value: SortField.CREATION_DATE,
}

CREATION_DATE_FORMAT = "%Y-%m-%d %H:%M"

# =============================================================================
# Widget IDs
# =============================================================================

NODE_TABLE_ID = "node-table"
NODE_DETAILS_ID = "node-details"
PAGINATOR_ID = "node-paginator"
CLUSTER_STATUS_ID = "cluster-status"

# =============================================================================
# Dialog and notification text
# =============================================================================

DELETE_NODE_DIALOG_TITLE = "Delete Node"
DELETE_NODE_DIALOG_MESSAGE = "Are you sure you want to permanently delete node {node}?"
DELETE_NODE_CONFIRM_LABEL = "Delete"
NODE_REMOVED_MESSAGE = "The {node} node was removed from the {cluster} cluster"
