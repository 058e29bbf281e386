"""Unit tests for KubeConsoleApp and the command line entry point.

This module tests:
- App class attributes (BINDINGS, TITLE)
- Constructor settings loading and context resolution
- Pagination settings updates
- Logging setup and the --version flag

Note: Tests avoid running the full Textual event loop (no app.run_test()).
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from textual.binding import Binding
from typer.testing import CliRunner

from kubeconsole import __version__
from kubeconsole.app import KubeConsoleApp
from kubeconsole.cli import app as cli_app
from kubeconsole.cli import configure_logging
from kubeconsole.constants import APP_TITLE
from kubeconsole.models.state.app_settings import UserSettings
from kubeconsole.models.state.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("KUBECONSOLE_CONFIG_DIR", str(tmp_path))
    return tmp_path


# =============================================================================
# Class Attributes
# =============================================================================


class TestAppClassAttributes:
    """Test KubeConsoleApp class-level attributes."""

    def test_app_bindings_are_binding_objects(self) -> None:
        for binding in KubeConsoleApp.BINDINGS:
            assert isinstance(binding, Binding)

    def test_app_title_set(self) -> None:
        assert KubeConsoleApp.TITLE == APP_TITLE


# =============================================================================
# Construction and settings
# =============================================================================


class TestAppSettings:
    """Test settings loading and pagination updates."""

    def test_uses_explicit_context_and_project(self) -> None:
        app = KubeConsoleApp(context="prod", project_id="payments")
        assert app.context == "prod"
        assert app.project_id == "payments"
        assert app.controller.context == "prod"

    def test_falls_back_to_saved_settings(self) -> None:
        ConfigManager.save(UserSettings(context="staging", default_project_id="web"))

        app = KubeConsoleApp()

        assert app.context == "staging"
        assert app.project_id == "web"

    def test_invalid_settings_fall_back_to_defaults(self, config_dir: Path) -> None:
        (config_dir / "settings.yaml").write_text("items_per_page: nope\n", encoding="utf-8")

        app = KubeConsoleApp(context="prod")

        assert app.settings == UserSettings()

    def test_set_items_per_page_publishes(self) -> None:
        app = KubeConsoleApp(context="prod")
        received: list[int] = []
        app.settings_stream.subscribe(lambda s: received.append(s.items_per_page))

        app.set_items_per_page(20)

        assert received == [10, 20]
        assert app.settings.items_per_page == 20

    def test_set_items_per_page_is_bounded(self) -> None:
        app = KubeConsoleApp(context="prod")

        app.set_items_per_page(1000)
        assert app.settings.items_per_page == 100

        app.action_page_size(-500)
        assert app.settings.items_per_page == 1


# =============================================================================
# Command line
# =============================================================================


class TestCli:
    """Test the Typer entry point."""

    def test_version_flag(self) -> None:
        result = CliRunner().invoke(cli_app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_configure_logging_to_file(self, tmp_path: Path) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging(debug=True, log_file=tmp_path / "logs" / "console.log")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0], logging.FileHandler)
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
