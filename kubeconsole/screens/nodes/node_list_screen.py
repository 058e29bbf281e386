"""Node list screen - node table, details panel, and node actions."""

from __future__ import annotations

import logging
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static
from textual.worker import Worker, WorkerState

from kubeconsole.constants.enums import Column, NodeHealthState, SortField
from kubeconsole.constants.values import DELETING, FAILED, PROVISIONING, RUNNING
from kubeconsole.controllers.base import BaseController
from kubeconsole.models.core.cluster_info import ClusterHealthStatus
from kubeconsole.models.core.node_info import Node
from kubeconsole.screens.nodes.config import (
    CLUSTER_STATUS_ID,
    CREATION_DATE_FORMAT,
    NODE_DETAILS_ID,
    NODE_TABLE_COLUMNS,
    NODE_TABLE_ID,
    PAGINATOR_ID,
    SORTABLE_COLUMNS,
)
from kubeconsole.screens.nodes.presenter import (
    NodeDeleted,
    NodeListPresenter,
    NodeTableChanged,
)
from kubeconsole.services.protocols import (
    AnalyticsService,
    ConfirmationDialog,
    NotificationService,
    UserService,
)
from kubeconsole.widgets.data.tables.node_table import NodeTable

logger = logging.getLogger(__name__)

_STATUS_MARKUP: dict[NodeHealthState, str] = {
    NodeHealthState.RUNNING: RUNNING,
    NodeHealthState.PROVISIONING: PROVISIONING,
    NodeHealthState.DELETING: DELETING,
    NodeHealthState.FAILED: FAILED,
}

_SORT_KEY_BY_FIELD: dict[SortField, str] = {field: key for key, field in SORTABLE_COLUMNS.items()}


class NodeListScreen(Screen[None]):
    """Screen listing the nodes of the active cluster."""

    DEFAULT_CSS = """
    NodeListScreen #cluster-status {
        height: 1;
        margin: 0 1;
    }

    NodeListScreen #node-details {
        height: auto;
        max-height: 12;
        margin: 0 1;
        padding: 0 1;
        border: round $primary;
    }

    NodeListScreen #node-paginator {
        height: 1;
        margin: 0 1;
        text-align: right;
    }
    """

    BINDINGS = [
        Binding("r", "refresh", "Refresh"),
        Binding("d", "delete_node", "Delete node"),
        Binding("1", "sort('name')", "Sort name", show=False),
        Binding("2", "sort('kubeletVersion')", "Sort version", show=False),
        Binding("3", "sort('creationDate')", "Sort created", show=False),
        Binding("n", "next_page", "Next page"),
        Binding("p", "previous_page", "Prev page"),
        Binding("y", "copy_node_name", "Copy name", show=False),
    ]

    def __init__(
        self,
        controller: BaseController,
        *,
        project_id: str,
        user_service: UserService,
        notification_service: NotificationService,
        dialog: ConfirmationDialog,
        analytics_service: AnalyticsService,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._notification_service = notification_service
        self.presenter = NodeListPresenter(
            self,
            cluster_service=controller,
            user_service=user_service,
            notification_service=notification_service,
            dialog=dialog,
            analytics_service=analytics_service,
        )
        self.presenter.set_inputs(
            cluster=controller.current_cluster(),
            project_id=project_id,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("Connecting...", id=CLUSTER_STATUS_ID)
        yield NodeTable(NODE_TABLE_COLUMNS, id=NODE_TABLE_ID)
        yield Static("", id=NODE_DETAILS_ID)
        yield Static("", id=PAGINATOR_ID)
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self.presenter.activate(), name="node-list-activate")
        self.action_refresh()

    def on_unmount(self) -> None:
        self.presenter.destroy()

    # =========================================================================
    # Data loading
    # =========================================================================

    def action_refresh(self) -> None:
        self.run_worker(
            self._load_nodes_worker,
            name="node-list-load",
            group="node-list-load",
            exclusive=True,
            exit_on_error=False,
        )

    async def _load_nodes_worker(self) -> None:
        result = await self._controller.load()
        health = ClusterHealthStatus.for_connection(result.success, result.error or "")
        if not result.success:
            logger.warning("Node list load failed: %s", result.error)
            self.presenter.set_inputs(cluster_health_status=health, is_cluster_running=False)
            return
        logger.debug("Loaded %d nodes in %.0f ms", len(result.data["nodes"]), result.duration_ms)
        self.presenter.set_inputs(
            cluster=self._controller.current_cluster(),
            nodes=result.data["nodes"],
            nodes_metrics=result.data["nodes_metrics"],
            cluster_health_status=health,
            is_cluster_running=True,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Report failed workers, including rejected node deletions."""
        if event.state != WorkerState.ERROR:
            return
        error = event.worker.error
        logger.error("Worker %s failed: %s", event.worker.name, error)
        self._notification_service.error(str(error) or "Operation failed")

    # =========================================================================
    # Presenter messages
    # =========================================================================

    def on_node_table_changed(self, _: NodeTableChanged) -> None:
        self._refresh_view()

    def on_node_deleted(self, message: NodeDeleted) -> None:
        remaining = [node for node in self.presenter.nodes if node.id != message.node.id]
        self.presenter.set_inputs(nodes=remaining)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _node_row(self, node: Node, can_delete: bool) -> tuple[Any, ...]:
        presenter = self.presenter
        name = node.name
        if presenter.show_info(node):
            name = f"{node.name} ({presenter.info(node)})"
        addresses = presenter.addresses(node)
        ip_addresses = ", ".join(
            addresses[kind] for kind in ("InternalIP", "ExternalIP") if kind in addresses
        )
        return (
            "▾" if presenter.is_expanded(node.id) else "▸",
            Text.from_markup(_STATUS_MARKUP[presenter.health_status(node).state]),
            name,
            node.kubelet_version,
            ip_addresses,
            node.creation_timestamp.strftime(CREATION_DATE_FORMAT),
            "delete" if can_delete else "",
        )

    def _refresh_view(self) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        table = self.query_one(NodeTable)
        state = presenter.sort_state
        table.set_sort_indicator(
            _SORT_KEY_BY_FIELD.get(state.field) if state.is_active else None,
            state.direction,
        )
        can_delete = presenter.can_delete()
        table.replace_data(
            [(node.id, self._node_row(node, can_delete)) for node in presenter.page_nodes()]
        )

        health = presenter.cluster_health_status
        cluster_name = presenter.cluster.name if presenter.cluster else "-"
        status = health.state.value if health else "Unknown"
        self.query_one(f"#{CLUSTER_STATUS_ID}", Static).update(
            f"Cluster {cluster_name}: {status} | {len(presenter.nodes)} nodes"
        )
        paginator = ""
        if presenter.is_paginator_visible():
            paginator = f"Page {presenter.page_index + 1}/{presenter.page_count}"
        self.query_one(f"#{PAGINATOR_ID}", Static).update(paginator)
        self._refresh_details()

    def _refresh_details(self) -> None:
        details = self.query_one(f"#{NODE_DETAILS_ID}", Static)
        node = self._selected_node()
        if node is None or not self.presenter.is_expanded(node.id):
            details.display = False
            return
        details.display = True
        presenter = self.presenter
        lines = [
            f"[b]{node.name}[/b]  id {presenter.node_name(node)}",
            f"OS: {presenter.operating_system(node) or '-'}"
            f"  kernel {node.status.node_info.kernel_version or '-'}",
            f"Memory: {presenter.formatted_memory(node.status.capacity.memory) or '-'}"
            f"  CPU: {node.status.capacity.cpu or '-'}",
        ]
        lines.extend(f"{kind}: {value}" for kind, value in presenter.addresses(node).items())
        metrics = presenter.metrics(node.name)
        if metrics is not None:
            lines.append(
                f"Usage: {metrics.cpu_total_millicores:.0f}m CPU, "
                f"{presenter.formatted_memory(str(metrics.memory_total_bytes))} memory"
            )
        tags = node.spec.cloud.tags
        if presenter.display_tags(tags):
            lines.append("Tags: " + ", ".join(f"{k}={v}" for k, v in tags.items()))
        health = presenter.health_status(node)
        if health.message:
            lines.append(f"[red]{health.message}[/red]")
        details.update("\n".join(lines))

    def _selected_node(self) -> Node | None:
        table = self.query_one(NodeTable)
        page = self.presenter.page_nodes()
        if not page or table.cursor_row < 0 or table.cursor_row >= len(page):
            return None
        return page[table.cursor_row]

    # =========================================================================
    # Table events
    # =========================================================================

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        node = self._selected_node()
        if node is None:
            return
        if event.cell_key.column_key.value == Column.ACTIONS.value:
            event.stop()
            self._start_delete(node)
            return
        # Copying is bound to "y", so table cells never carry the copy-control class.
        self.presenter.toggle_expanded(node.id)
        self._refresh_view()

    def on_data_table_cell_highlighted(self, _: DataTable.CellHighlighted) -> None:
        self._refresh_details()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        field = SORTABLE_COLUMNS.get(str(event.column_key.value))
        if field is not None:
            self.presenter.toggle_sort(field)

    # =========================================================================
    # Actions
    # =========================================================================

    def _start_delete(self, node: Node) -> None:
        if not self.presenter.can_delete():
            self.notify("You are not allowed to delete nodes", severity="warning")
            return
        self.run_worker(
            self.presenter.delete_node_dialog(node),
            name="delete-node",
            group="delete-node",
            exit_on_error=False,
        )

    def action_delete_node(self) -> None:
        node = self._selected_node()
        if node is not None:
            self._start_delete(node)

    def action_sort(self, field: str) -> None:
        self.presenter.toggle_sort(SortField(field))

    def action_next_page(self) -> None:
        self.presenter.next_page()

    def action_previous_page(self) -> None:
        self.presenter.previous_page()

    def action_copy_node_name(self) -> None:
        node = self._selected_node()
        if node is None:
            return
        self.app.copy_to_clipboard(self.presenter.node_name(node))
        self.notify(f"Copied {self.presenter.node_name(node)}")
