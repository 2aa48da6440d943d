"""Configuration package for runtime settings and startup validation."""

from .remote_apps import RemoteAppConfig, config_parse_remote_apps
from .settings import AppSettings, SettingsLoadError, config_load_remote_apps, config_load_settings

__all__ = [
    "AppSettings",
    "RemoteAppConfig",
    "SettingsLoadError",
    "config_load_remote_apps",
    "config_load_settings",
    "config_parse_remote_apps",
]
