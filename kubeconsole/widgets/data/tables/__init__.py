"""Table widgets."""

from kubeconsole.widgets.data.tables.node_table import NodeTable

__all__ = ["NodeTable"]
