"""Widgets for KubeConsole."""

from kubeconsole.widgets.data import NodeTable
from kubeconsole.widgets.feedback import CustomConfirmDialog

__all__ = ["CustomConfirmDialog", "NodeTable"]
