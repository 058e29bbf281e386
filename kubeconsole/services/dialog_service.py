"""Confirmation dialogs shown as Textual modal screens."""

from __future__ import annotations

import asyncio
from typing import Any

from kubeconsole.services.protocols import DialogConfig
from kubeconsole.widgets.feedback.custom_dialog import CustomConfirmDialog


class ModalConfirmationDialog:
    """Opens a CustomConfirmDialog and resolves with the user's decision."""

    def __init__(self, app: Any) -> None:
        self._app = app

    def open(self, config: DialogConfig) -> asyncio.Future[bool]:
        future: asyncio.Future[bool] = asyncio.get_running_loop().create_future()

        def _on_dismiss(result: bool | None) -> None:
            if not future.done():
                future.set_result(bool(result))

        self._app.push_screen(
            CustomConfirmDialog(
                config.message,
                title=config.title,
                confirm_label=config.confirm_label,
                dismissable=not config.disable_close,
            ),
            callback=_on_dismiss,
        )
        return future
