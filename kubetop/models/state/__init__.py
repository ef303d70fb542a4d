"""Application state and settings models."""

from kubetop.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from kubetop.models.state.config_manager import ConfigManager

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
