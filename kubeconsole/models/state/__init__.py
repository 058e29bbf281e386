"""Settings state and persistence."""

from kubeconsole.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    UserSettings,
)
from kubeconsole.models.state.config_manager import ConfigManager
from kubeconsole.models.state.settings_stream import SettingsStream, Subscription

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "SettingsStream",
    "Subscription",
    "UserSettings",
]
