"""Persistent storage for user settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubeconsole.models.state.app_settings import (
    ConfigLoadError,
    ConfigSaveError,
    UserSettings,
)

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "KUBECONSOLE_CONFIG_DIR"
SETTINGS_FILE_NAME = "settings.yaml"


class ConfigManager:
    """Loads and saves UserSettings as YAML."""

    @staticmethod
    def settings_path() -> Path:
        override = os.environ.get(CONFIG_DIR_ENV, "").strip()
        base_dir = Path(override) if override else Path.home() / ".config" / "kubeconsole"
        return base_dir / SETTINGS_FILE_NAME

    @classmethod
    def load(cls) -> UserSettings:
        """Load settings, returning defaults when no file exists yet.

        Raises:
            ConfigLoadError: If the file exists but cannot be read or validated.
        """
        path = cls.settings_path()
        if not path.exists():
            logger.debug("No settings file at %s, using defaults", path)
            return UserSettings()
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Expected a mapping in {path}")
        try:
            return UserSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {path}: {e}") from e

    @classmethod
    def save(cls, settings: UserSettings) -> None:
        """Persist settings.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        path = cls.settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigSaveError(f"Cannot write {path}: {e}") from e
        logger.debug("Saved settings to %s", path)

    @classmethod
    def reset(cls) -> UserSettings:
        """Restore and persist default settings."""
        settings = UserSettings()
        cls.save(settings)
        return settings
