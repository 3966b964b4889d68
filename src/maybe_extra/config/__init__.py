"""Config – 12-factor settings and loaders."""

from maybe_extra.config.loaders import EnvSettingsLoader, SettingsLoader
from maybe_extra.config.settings import LoggingSettings, Settings

__all__ = [
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
]
