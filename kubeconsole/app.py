"""Main application class for KubeConsole."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from kubeconsole.constants.limits import ITEMS_PER_PAGE_MAX, ITEMS_PER_PAGE_MIN
from kubeconsole.constants.values import APP_TITLE
from kubeconsole.controllers.cluster.controller import ClusterController
from kubeconsole.models.state.app_settings import (
    ConfigLoadError,
    ConfigSaveError,
    UserSettings,
)
from kubeconsole.models.state.config_manager import ConfigManager
from kubeconsole.models.state.settings_stream import SettingsStream
from kubeconsole.screens.nodes.node_list_screen import NodeListScreen
from kubeconsole.services.analytics_service import LoggingAnalyticsService
from kubeconsole.services.dialog_service import ModalConfirmationDialog
from kubeconsole.services.notification_service import AppNotificationService
from kubeconsole.services.user_service import SettingsUserService

logger = logging.getLogger(__name__)


class KubeConsoleApp(App[None]):
    """Main TUI application for KubeConsole."""

    TITLE = APP_TITLE
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("plus", "page_size(1)", "More rows"),
        Binding("minus", "page_size(-1)", "Fewer rows"),
    ]

    settings_stream: SettingsStream

    def __init__(
        self,
        context: str | None = None,
        project_id: str | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings_stream = SettingsStream(self._load_settings())
        settings = self.settings_stream.current
        self.context = context or settings.context or ClusterController.resolve_current_context()
        self.project_id = project_id or settings.default_project_id
        self.controller = ClusterController(self.context)
        self.user_service = SettingsUserService(self.settings_stream)
        self.analytics_service = LoggingAnalyticsService()

    @staticmethod
    def _load_settings() -> UserSettings:
        """Load user settings from persistent storage."""
        try:
            return ConfigManager.load()
        except ConfigLoadError as e:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", e)
            return UserSettings()

    @property
    def settings(self) -> UserSettings:
        return self.settings_stream.current

    def on_mount(self) -> None:
        self.sub_title = f"{self.controller.current_cluster().name} / {self.project_id}"
        self.push_screen(
            NodeListScreen(
                self.controller,
                project_id=self.project_id,
                user_service=self.user_service,
                notification_service=AppNotificationService(self),
                dialog=ModalConfirmationDialog(self),
                analytics_service=self.analytics_service,
            )
        )

    def set_items_per_page(self, items_per_page: int) -> None:
        """Publish new pagination settings to every subscriber."""
        bounded = max(ITEMS_PER_PAGE_MIN, min(ITEMS_PER_PAGE_MAX, items_per_page))
        if bounded == self.settings.items_per_page:
            return
        self.settings_stream.publish(self.settings.model_copy(update={"items_per_page": bounded}))

    def action_page_size(self, delta: int) -> None:
        self.set_items_per_page(self.settings.items_per_page + delta)

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        try:
            ConfigManager.save(self.settings)
        except ConfigSaveError as e:
            logger.error("Failed to save settings: %s", e)


__all__ = [
    "KubeConsoleApp",
]
