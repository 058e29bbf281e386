"""Services used by the node list."""

from kubeconsole.services.analytics_service import LoggingAnalyticsService
from kubeconsole.services.protocols import (
    AnalyticsService,
    ClusterService,
    ConfirmationDialog,
    DialogConfig,
    NotificationService,
    UserService,
)
from kubeconsole.services.user_service import SettingsUserService

__all__ = [
    "AnalyticsService",
    "ClusterService",
    "ConfirmationDialog",
    "DialogConfig",
    "LoggingAnalyticsService",
    "NotificationService",
    "SettingsUserService",
    "UserService",
]
