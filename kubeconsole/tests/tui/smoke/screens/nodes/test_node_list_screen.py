"""Smoke tests for NodeListScreen - node table, bindings, and presenter wiring.

This module tests:
- Screen class attributes and bindings
- Screen construction with injected services
- Rendering presenter rows into the node table
- Sort keybindings
- Node deletion through the delete binding and the actions column

Note: Tests using app.run_test() are kept minimal due to Textual testing overhead.
"""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest
from textual.app import App
from textual.worker import WorkerFailed

from kubeconsole.constants.enums import SortDirection, SortField
from kubeconsole.controllers.base import BaseController
from kubeconsole.controllers.cluster.controller import ClusterCommandError
from kubeconsole.models.core.cluster_info import Cluster
from kubeconsole.models.core.node_info import Node
from kubeconsole.models.state.settings_stream import SettingsStream
from kubeconsole.screens.nodes import NodeListPresenter, NodeListScreen
from kubeconsole.services.analytics_service import LoggingAnalyticsService
from kubeconsole.services.user_service import SettingsUserService
from kubeconsole.widgets import NodeTable

# =============================================================================
# Test Fixtures
# =============================================================================


class FakeClusterController(BaseController):
    """In-memory stand-in for ClusterController."""

    def __init__(self, nodes: list[Node]) -> None:
        super().__init__()
        self._nodes = nodes
        self.deleted: list[tuple[str, str, str]] = []

    def current_cluster(self) -> Cluster:
        return Cluster(id="kind-dev", name="kind-dev")

    async def check_connection(self) -> bool:
        return True

    async def fetch_all(self) -> dict[str, Any]:
        return {"nodes": list(self._nodes), "nodes_metrics": {}}

    async def delete_node(self, project_id: str, cluster_id: str, node_id: str) -> None:
        self.deleted.append((project_id, cluster_id, node_id))


def _nodes() -> list[Node]:
    return [
        Node(
            id=f"machine-{name}",
            name=name,
            creation_timestamp=datetime(2024, 3, day, tzinfo=timezone.utc),
        )
        for day, name in ((1, "worker-b"), (2, "worker-a"))
    ]


class RejectingClusterController(FakeClusterController):
    """Controller whose node deletions are refused by the API server."""

    async def delete_node(self, project_id: str, cluster_id: str, node_id: str) -> None:
        raise ClusterCommandError("Forbidden")


async def _answer(confirmed: bool) -> bool:
    return confirmed


def _confirming_dialog() -> MagicMock:
    dialog = MagicMock()
    dialog.open = MagicMock(side_effect=lambda config: _answer(True))
    return dialog


def _make_screen(
    controller: FakeClusterController | None = None,
    *,
    notification_service: MagicMock | None = None,
    dialog: MagicMock | None = None,
) -> NodeListScreen:
    return NodeListScreen(
        controller or FakeClusterController(_nodes()),
        project_id="default",
        user_service=SettingsUserService(SettingsStream()),
        notification_service=notification_service or MagicMock(),
        dialog=dialog or MagicMock(),
        analytics_service=LoggingAnalyticsService(),
    )


class NodeListTestApp(App[None]):
    """Minimal app hosting a single NodeListScreen."""

    def __init__(self, screen: NodeListScreen) -> None:
        super().__init__()
        self._node_screen = screen

    def on_mount(self) -> None:
        self.push_screen(self._node_screen)


# =============================================================================
# Class Attribute Tests
# =============================================================================


class TestNodeListScreenAttributes:
    """Test NodeListScreen class attributes."""

    def test_screen_has_bindings(self) -> None:
        keys = {binding.key for binding in NodeListScreen.BINDINGS}
        assert {"r", "d", "1", "2", "3", "n", "p", "y"} <= keys

    def test_sort_bindings_target_sort_fields(self) -> None:
        actions = {binding.key: binding.action for binding in NodeListScreen.BINDINGS}
        assert actions["1"] == "sort('name')"
        assert actions["2"] == "sort('kubeletVersion')"
        assert actions["3"] == "sort('creationDate')"

    def test_screen_has_action_methods(self) -> None:
        for name in (
            "action_refresh",
            "action_delete_node",
            "action_sort",
            "action_next_page",
            "action_previous_page",
            "action_copy_node_name",
        ):
            assert callable(getattr(NodeListScreen, name, None))


# =============================================================================
# Construction Tests
# =============================================================================


class TestNodeListScreenConstruction:
    """Test NodeListScreen construction."""

    def test_screen_creates_presenter(self) -> None:
        screen = _make_screen()
        assert isinstance(screen.presenter, NodeListPresenter)

    def test_presenter_receives_cluster_and_project(self) -> None:
        screen = _make_screen()
        assert screen.presenter.cluster is not None
        assert screen.presenter.cluster.id == "kind-dev"
        assert screen.presenter.project_id == "default"


# =============================================================================
# Runtime Tests
# =============================================================================


class TestNodeListScreenRuntime:
    """Test NodeListScreen inside a running app."""

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_nodes_rendered_sorted_by_name(self) -> None:
        screen = _make_screen()
        app = NodeListTestApp(screen)

        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            table = screen.query_one(NodeTable)
            assert table.row_count == 2
            assert [n.name for n in screen.presenter.page_nodes()] == ["worker-a", "worker-b"]
            assert screen.presenter.can_delete() is True

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_sort_binding_toggles_direction(self) -> None:
        screen = _make_screen()
        app = NodeListTestApp(screen)

        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.press("1")
            await pilot.pause()

            state = screen.presenter.sort_state
            assert state.field == SortField.NAME
            assert state.direction == SortDirection.DESCENDING
            assert [n.name for n in screen.presenter.displayed_nodes] == [
                "worker-b",
                "worker-a",
            ]


# =============================================================================
# Delete Tests
# =============================================================================


async def _settle(app: App[None], pilot: Any) -> None:
    """Let workers finish and the resulting messages reach the screen."""
    await pilot.pause()
    with suppress(WorkerFailed):
        await app.workers.wait_for_complete()
    await pilot.pause()
    await pilot.pause()


class TestNodeListScreenDelete:
    """Test the node delete flow from the screen."""

    def test_actions_cell_stops_event_before_delete_starts(self) -> None:
        screen = _make_screen()
        node = _nodes()[0]
        event = MagicMock()
        event.cell_key.column_key.value = "actions"
        stopped_at_start: list[bool] = []
        screen._selected_node = MagicMock(return_value=node)
        screen._start_delete = MagicMock(
            side_effect=lambda n: stopped_at_start.append(event.stop.called)
        )

        screen.on_data_table_cell_selected(event)

        event.stop.assert_called_once()
        screen._start_delete.assert_called_once_with(node)
        assert stopped_at_start == [True]

    def test_name_cell_toggles_expansion_without_delete(self) -> None:
        screen = _make_screen()
        node = _nodes()[0]
        event = MagicMock()
        event.cell_key.column_key.value = "name"
        screen._selected_node = MagicMock(return_value=node)
        screen._start_delete = MagicMock()

        screen.on_data_table_cell_selected(event)

        screen._start_delete.assert_not_called()
        event.stop.assert_not_called()
        assert screen.presenter.is_expanded(node.id) is True

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_confirmed_delete_removes_row(self) -> None:
        controller = FakeClusterController(_nodes())
        notifications = MagicMock()
        screen = _make_screen(
            controller, notification_service=notifications, dialog=_confirming_dialog()
        )
        app = NodeListTestApp(screen)

        async with app.run_test(size=(140, 40)) as pilot:
            await _settle(app, pilot)
            assert screen.query_one(NodeTable).row_count == 2

            await pilot.press("d")
            await _settle(app, pilot)

            assert controller.deleted == [("default", "kind-dev", "machine-worker-a")]
            assert screen.query_one(NodeTable).row_count == 1
            assert [n.name for n in screen.presenter.nodes] == ["worker-b"]
            notifications.success.assert_called_once_with(
                "The worker-a node was removed from the kind-dev cluster"
            )
            notifications.error.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_rejected_delete_keeps_rows_and_reports_error(self) -> None:
        controller = RejectingClusterController(_nodes())
        notifications = MagicMock()
        screen = _make_screen(
            controller, notification_service=notifications, dialog=_confirming_dialog()
        )
        app = NodeListTestApp(screen)

        async with app.run_test(size=(140, 40)) as pilot:
            await _settle(app, pilot)

            await pilot.press("d")
            await _settle(app, pilot)

            assert screen.query_one(NodeTable).row_count == 2
            assert len(screen.presenter.nodes) == 2
            notifications.error.assert_called_once_with("Forbidden")
            notifications.success.assert_not_called()
