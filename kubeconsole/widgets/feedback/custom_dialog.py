"""Custom dialog widgets for the console.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed (they manage their own lifecycle)

CSS Classes: widget-custom-dialog
"""

from collections.abc import Callable
from contextlib import suppress

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Button, Static

_DIALOG_MIN_WIDTH = 36
_DIALOG_SIDE_MARGIN = 6
_DIALOG_CONTENT_PADDING = 8


def _max_line_width(*values: str) -> int:
    width = 0
    for value in values:
        for line in value.splitlines() or [""]:
            width = max(width, len(line))
    return width


def _fit_dialog_width(dialog: ModalScreen, content_width: int) -> int:
    available_width = max(
        _DIALOG_MIN_WIDTH,
        getattr(dialog.app.size, "width", _DIALOG_MIN_WIDTH + _DIALOG_SIDE_MARGIN)
        - _DIALOG_SIDE_MARGIN,
    )
    return max(
        _DIALOG_MIN_WIDTH,
        min(content_width + _DIALOG_CONTENT_PADDING, available_width),
    )


class CustomConfirmDialog(ModalScreen[bool]):
    """Confirmation dialog with a confirm and a Cancel button."""

    DEFAULT_CSS = """
    CustomConfirmDialog {
        align: center middle;
    }

    CustomConfirmDialog .dialog-container {
        height: auto;
        padding: 1 2;
        border: round $error;
        background: $surface;
    }

    CustomConfirmDialog .dialog-title {
        text-style: bold;
        margin-bottom: 1;
    }

    CustomConfirmDialog .dialog-buttons {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel", show=False)]

    _default_classes = "widget-custom-dialog"

    def __init__(
        self,
        message: str,
        title: str = "Confirm",
        confirm_label: str = "OK",
        dismissable: bool = True,
        on_confirm: Callable[[], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the custom confirmation dialog.

        Args:
            message: Message to display.
            title: Dialog title.
            confirm_label: Label of the confirm button.
            dismissable: Whether Escape closes the dialog as a cancel.
            on_confirm: Callback when confirmed.
            on_cancel: Callback when cancelled.
        """
        super().__init__(classes=self._default_classes)
        self._message = message
        self._title = title
        self._confirm_label = confirm_label
        self._dismissable = dismissable
        self._on_confirm = on_confirm
        self._on_cancel = on_cancel

    def compose(self):
        with Vertical(classes="dialog-container"):
            if self._title:
                yield Static(self._title, classes="dialog-title")
            yield Static(self._message, classes="dialog-message")
            with Horizontal(classes="dialog-buttons"):
                yield Button(
                    self._confirm_label,
                    id="confirm-btn",
                    variant="error",
                    classes="dialog-btn confirm",
                )
                yield Button(
                    "Cancel",
                    id="cancel-btn",
                    classes="dialog-btn cancel",
                )

    def on_mount(self) -> None:
        self._apply_dynamic_layout()

    def on_resize(self, _: Resize) -> None:
        self._apply_dynamic_layout()

    def _apply_dynamic_layout(self) -> None:
        content_width = max(
            _max_line_width(self._title, self._message),
            len(self._confirm_label) + len("Cancel") + 9,
        )
        dialog_width = str(_fit_dialog_width(self, content_width))
        with suppress(Exception):
            container = self.query_one(".dialog-container", Vertical)
            container.styles.width = dialog_width
            container.styles.max_width = dialog_width

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "confirm-btn":
            self.dismiss(True)
            if self._on_confirm:
                self._on_confirm()
        else:
            self.dismiss(False)
            if self._on_cancel:
                self._on_cancel()

    def action_cancel(self) -> None:
        if not self._dismissable:
            return
        self.dismiss(False)
        if self._on_cancel:
            self._on_cancel()
