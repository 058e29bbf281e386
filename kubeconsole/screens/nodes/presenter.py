"""Node list presenter - sorting, permissions, pagination, and the delete workflow."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from textual.message import Message

from kubeconsole.constants.defaults import ITEMS_PER_PAGE_DEFAULT
from kubeconsole.constants.enums import Permission, SortDirection, SortField
from kubeconsole.constants.values import (
    ANALYTICS_CATEGORY_CLUSTER_OVERVIEW,
    ANALYTICS_DELETE_NODE_DIALOG_OPENED,
    ANALYTICS_NODE_DELETED,
    COPY_CONTROL_CLASS,
    RESOURCE_NODES,
)
from kubeconsole.models.core.cluster_info import Cluster, ClusterHealthStatus
from kubeconsole.models.core.member_info import GroupConfig, Member
from kubeconsole.models.core.metrics_info import NodeMetrics
from kubeconsole.models.core.node_info import Node, NodeHealthStatus
from kubeconsole.models.state.app_settings import UserSettings
from kubeconsole.models.state.settings_stream import Subscription
from kubeconsole.screens.nodes.config import (
    DELETE_NODE_CONFIRM_LABEL,
    DELETE_NODE_DIALOG_MESSAGE,
    DELETE_NODE_DIALOG_TITLE,
    NODE_REMOVED_MESSAGE,
)
from kubeconsole.services.protocols import (
    AnalyticsService,
    ClusterService,
    ConfirmationDialog,
    DialogConfig,
    NotificationService,
    UserService,
)
from kubeconsole.utils import node_utils
from kubeconsole.utils.member_utils import has_permission
from kubeconsole.utils.versions import VersionKey

logger = logging.getLogger(__name__)


# =============================================================================
# Messages
# =============================================================================


class NodeDeleted(Message):
    """Message posted once a node deletion has been accepted by the cluster."""

    def __init__(self, node: Node) -> None:
        super().__init__()
        self.node = node


class NodeTableChanged(Message):
    """Message indicating the displayed rows, page, or permissions changed."""


# =============================================================================
# Sort state
# =============================================================================


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction of the node table."""

    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def is_active(self) -> bool:
        return self.field != SortField.NONE and self.direction != SortDirection.NONE


# Creation dates sort chronologically: ascending is oldest first.
_SORT_KEYS: dict[SortField, Callable[[Node], Any]] = {
    SortField.NAME: lambda node: node.name,
    SortField.KUBELET_VERSION: lambda node: VersionKey(node.kubelet_version),
    SortField.CREATION_DATE: lambda node: node.creation_timestamp.timestamp(),
}

_UNSET: Any = object()


class NodeListPresenter:
    """Presenter for the node list - owns table state and node actions.

    The parent screen supplies the inputs (cluster, nodes, metrics, health)
    through ``set_inputs`` and receives ``NodeTableChanged`` and
    ``NodeDeleted`` messages back.
    """

    def __init__(
        self,
        screen: Any,
        *,
        cluster_service: ClusterService,
        user_service: UserService,
        notification_service: NotificationService,
        dialog: ConfirmationDialog,
        analytics_service: AnalyticsService,
    ) -> None:
        self._screen = screen
        self._cluster_service = cluster_service
        self._user_service = user_service
        self._notification_service = notification_service
        self._dialog = dialog
        self._analytics_service = analytics_service

        # Inputs
        self._cluster: Cluster | None = None
        self._nodes: list[Node] = []
        self._nodes_metrics: dict[str, NodeMetrics] = {}
        self._project_id = ""
        self._cluster_health_status: ClusterHealthStatus | None = None
        self._is_cluster_running = False

        # Table state
        self._sort_state = SortState()
        self._displayed_nodes: list[Node] = []
        self._page_size = ITEMS_PER_PAGE_DEFAULT
        self._page_index = 0
        self._expanded: dict[str, bool] = {}

        # Resolved once on activation
        self._user: Member | None = None
        self._group_config: GroupConfig | None = None

        self._subscriptions: list[Subscription] = []
        self._destroyed = False

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def cluster(self) -> Cluster | None:
        return self._cluster

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes)

    @property
    def displayed_nodes(self) -> list[Node]:
        return list(self._displayed_nodes)

    @property
    def project_id(self) -> str:
        return self._project_id

    @property
    def cluster_health_status(self) -> ClusterHealthStatus | None:
        return self._cluster_health_status

    @property
    def is_cluster_running(self) -> bool:
        return self._is_cluster_running

    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(len(self._displayed_nodes) / self._page_size))

    @property
    def user(self) -> Member | None:
        return self._user

    @property
    def group_config(self) -> GroupConfig | None:
        return self._group_config

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def activate(self) -> None:
        """Subscribe to user settings and resolve the current user and group.

        The user and group config are fetched once and cached. A failed
        lookup leaves them unresolved, which keeps node actions disabled.
        """
        subscription = self._user_service.current_user_settings.subscribe(
            self._on_settings_changed
        )
        self._subscriptions.append(subscription)

        try:
            user = await self._user_service.current_user()
        except Exception as e:
            logger.warning("Failed to resolve current user: %s", e)
        else:
            if not self._destroyed:
                self._user = user

        try:
            group = await self._user_service.current_user_group(self._project_id)
            group_config = self._user_service.group_config(group)
        except Exception as e:
            logger.warning("Failed to resolve group config for %s: %s", self._project_id, e)
        else:
            if not self._destroyed:
                self._group_config = group_config

        self._notify_changed()

    def destroy(self) -> None:
        """Cancel every subscription; no settings callback fires afterwards."""
        self._destroyed = True
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()

    def _on_settings_changed(self, settings: UserSettings) -> None:
        self._page_size = max(1, settings.items_per_page)
        self._clamp_page_index()
        self._notify_changed()

    def _notify_changed(self) -> None:
        if self._destroyed:
            return
        self._screen.post_message(NodeTableChanged())

    # =========================================================================
    # Inputs
    # =========================================================================

    def set_inputs(
        self,
        *,
        cluster: Cluster | None = _UNSET,
        nodes: Iterable[Node] = _UNSET,
        nodes_metrics: Mapping[str, NodeMetrics] = _UNSET,
        project_id: str = _UNSET,
        cluster_health_status: ClusterHealthStatus | None = _UNSET,
        is_cluster_running: bool = _UNSET,
    ) -> None:
        """Replace any subset of the inputs and re-apply the current sort."""
        if cluster is not _UNSET:
            self._cluster = cluster
        if nodes is not _UNSET:
            self._nodes = list(nodes)
        if nodes_metrics is not _UNSET:
            self._nodes_metrics = dict(nodes_metrics)
        if project_id is not _UNSET:
            self._project_id = project_id
        if cluster_health_status is not _UNSET:
            self._cluster_health_status = cluster_health_status
        if is_cluster_running is not _UNSET:
            self._is_cluster_running = is_cluster_running
        self.on_sort_change(self._sort_state)

    # =========================================================================
    # Sorting
    # =========================================================================

    def apply_sort(self, state: SortState | None) -> list[Node]:
        """Return the input nodes ordered by ``state``.

        An inactive state returns the input order. The input list is never
        mutated.
        """
        data = list(self._nodes)
        if state is None or not state.is_active:
            return data
        key = _SORT_KEYS.get(state.field)
        if key is None:
            return data
        return sorted(data, key=key, reverse=state.direction == SortDirection.DESCENDING)

    def on_sort_change(self, state: SortState | None) -> None:
        self._sort_state = state if state is not None else SortState(
            SortField.NONE, SortDirection.NONE
        )
        self._displayed_nodes = self.apply_sort(state)
        self._clamp_page_index()
        self._notify_changed()

    def sort_by(self, field: SortField, direction: SortDirection) -> None:
        self.on_sort_change(SortState(field, direction))

    def toggle_sort(self, field: SortField) -> SortState:
        """Cycle ``field`` through ascending, descending and unsorted."""
        current = self._sort_state
        if current.field != field or not current.is_active:
            state = SortState(field, SortDirection.ASCENDING)
        elif current.direction == SortDirection.ASCENDING:
            state = SortState(field, SortDirection.DESCENDING)
        else:
            state = SortState(field, SortDirection.NONE)
        self.on_sort_change(state)
        return state

    # =========================================================================
    # Pagination
    # =========================================================================

    def _clamp_page_index(self) -> None:
        self._page_index = min(self._page_index, self.page_count - 1)

    def page_nodes(self) -> list[Node]:
        start = self._page_index * self._page_size
        return self._displayed_nodes[start:start + self._page_size]

    def next_page(self) -> bool:
        if self._page_index + 1 >= self.page_count:
            return False
        self._page_index += 1
        self._notify_changed()
        return True

    def previous_page(self) -> bool:
        if self._page_index == 0:
            return False
        self._page_index -= 1
        self._notify_changed()
        return True

    def is_paginator_visible(self) -> bool:
        return bool(self._nodes) and len(self._nodes) > self._page_size

    # =========================================================================
    # Permissions and actions
    # =========================================================================

    def can_delete(self) -> bool:
        return has_permission(self._user, self._group_config, RESOURCE_NODES, Permission.DELETE)

    async def delete_node_dialog(self, node: Node, event: Any = None) -> bool:
        """Ask for confirmation and delete ``node``.

        Returns True when the node was deleted. Errors raised by the cluster
        service propagate to the caller; nothing is notified in that case.
        """
        if event is not None:
            event.stop()

        cluster = self._cluster
        if not self.can_delete() or cluster is None:
            logger.info("Delete of node %s refused: not permitted or no cluster", node.id)
            return False

        pending = self._dialog.open(
            DialogConfig(
                title=DELETE_NODE_DIALOG_TITLE,
                message=DELETE_NODE_DIALOG_MESSAGE.format(node=node.name),
                confirm_label=DELETE_NODE_CONFIRM_LABEL,
            )
        )
        self._analytics_service.emit_event(
            ANALYTICS_CATEGORY_CLUSTER_OVERVIEW, ANALYTICS_DELETE_NODE_DIALOG_OPENED
        )

        if not await pending:
            return False

        await self._cluster_service.delete_node(self._project_id, cluster.id, node.id)

        self._notification_service.success(
            NODE_REMOVED_MESSAGE.format(node=node.name, cluster=cluster.name)
        )
        self._analytics_service.emit_event(
            ANALYTICS_CATEGORY_CLUSTER_OVERVIEW, ANALYTICS_NODE_DELETED
        )
        self._screen.post_message(NodeDeleted(node))
        return True

    # =========================================================================
    # Row expansion
    # =========================================================================

    def toggle_expanded(self, node_id: str, target_classes: Iterable[str] = ()) -> bool:
        """Flip the expanded flag of a row unless a copy control was clicked.

        The node list screen copies names through its own key binding and
        passes no classes, so every cell click toggles there.
        """
        if COPY_CONTROL_CLASS not in set(target_classes):
            self._expanded[node_id] = not self._expanded.get(node_id, False)
        return self._expanded.get(node_id, False)

    def is_expanded(self, node_id: str) -> bool:
        return self._expanded.get(node_id, False)

    # =========================================================================
    # Display helpers
    # =========================================================================

    @staticmethod
    def version_headline(cluster_type: str, is_kubelet: bool) -> str:
        return Cluster.version_headline(cluster_type, is_kubelet)

    @staticmethod
    def health_status(node: Node) -> NodeHealthStatus:
        return NodeHealthStatus.for_node(node)

    @staticmethod
    def formatted_memory(memory: str) -> str:
        return node_utils.get_formatted_node_memory(memory)

    @staticmethod
    def addresses(node: Node) -> dict[str, str]:
        return node_utils.get_addresses(node)

    @staticmethod
    def show_info(node: Node) -> bool:
        return node.name != node_utils.strip_machine_prefix(node.id) and node.id != ""

    @staticmethod
    def info(node: Node) -> str:
        if node_utils.is_aws_node(node):
            return node.name
        return node_utils.strip_machine_prefix(node.id)

    @staticmethod
    def node_name(node: Node) -> str:
        return node_utils.strip_machine_prefix(node.id)

    @staticmethod
    def display_tags(tags: Mapping[str, Any] | None) -> bool:
        return node_utils.has_tags(tags)

    @staticmethod
    def operating_system(node: Node) -> str:
        return node_utils.get_operating_system(node)

    @staticmethod
    def operating_system_logo_class(node: Node) -> str:
        return node_utils.get_operating_system_logo_class(node)

    def metrics(self, node_name: str) -> NodeMetrics | None:
        return self._nodes_metrics.get(node_name)
