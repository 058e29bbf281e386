"""Node list screen module exports."""

from kubeconsole.screens.nodes.node_list_screen import NodeListScreen
from kubeconsole.screens.nodes.presenter import (
    NodeDeleted,
    NodeListPresenter,
    NodeTableChanged,
    SortState,
)

__all__ = [
    "NodeDeleted",
    "NodeListPresenter",
    "NodeListScreen",
    "NodeTableChanged",
    "SortState",
]
