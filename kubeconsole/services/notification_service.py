"""Toast notifications shown through the running Textual app."""

from __future__ import annotations

from typing import Any

from kubeconsole.constants.enums import NotificationSeverity


class AppNotificationService:
    """Shows notifications with ``App.notify``."""

    def __init__(self, app: Any) -> None:
        self._app = app

    def success(self, message: str) -> None:
        self._app.notify(message, severity=NotificationSeverity.INFORMATION.value)

    def error(self, message: str) -> None:
        self._app.notify(message, title="Error", severity=NotificationSeverity.ERROR.value)
