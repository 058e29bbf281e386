"""Data display widgets."""

from kubeconsole.widgets.data.tables import NodeTable

__all__ = ["NodeTable"]
