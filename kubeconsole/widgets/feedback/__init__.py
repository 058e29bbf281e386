"""Feedback widgets: dialogs."""

from kubeconsole.widgets.feedback.custom_dialog import CustomConfirmDialog

__all__ = ["CustomConfirmDialog"]
