"""Base controller classes."""

from kubeconsole.controllers.base.base_controller import BaseController, WorkerResult

__all__ = ["BaseController", "WorkerResult"]
