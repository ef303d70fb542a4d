"""Settings file loading.

Settings are read once at startup from an optional YAML file; kubetop never
writes it back.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubetop.constants.defaults import CONFIG_PATH_DEFAULT
from kubetop.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "KUBETOP_CONFIG"


class ConfigManager:
    """Locates, reads and validates the settings file."""

    def __init__(self, path: Path | str | None = None) -> None:
        """Initialize the manager.

        Args:
            path: Explicit settings path. Falls back to ``$KUBETOP_CONFIG``
                and then ``~/.config/kubetop/config.yaml``.
        """
        self._explicit = path is not None or bool(os.environ.get(CONFIG_PATH_ENV))
        if path is None:
            path = os.environ.get(CONFIG_PATH_ENV) or CONFIG_PATH_DEFAULT
        self.path = Path(path).expanduser()

    def load(self) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: The file exists but cannot be read or is invalid,
                or an explicitly requested file is missing.
        """
        if not self.path.exists():
            if self._explicit:
                raise ConfigLoadError(f"Settings file not found: {self.path}")
            logger.debug("No settings file at %s, using defaults", self.path)
            return AppSettings()

        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings file {self.path}: {exc}") from exc

        return self.parse(raw, source=str(self.path))

    @staticmethod
    def parse(raw: Any, source: str = "<settings>") -> AppSettings:
        """Validate a decoded YAML document into AppSettings."""
        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{source}: expected a mapping at the top level")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"{source}: {exc}") from exc

    @staticmethod
    def apply_overrides(settings: AppSettings, **overrides: Any) -> AppSettings:
        """Return a copy of ``settings`` with non-empty overrides applied."""
        updates = {key: value for key, value in overrides.items() if value not in (None, "")}
        if not updates:
            return settings
        try:
            return AppSettings.model_validate({**settings.model_dump(), **updates})
        except ValidationError as exc:
            raise ConfigLoadError(str(exc)) from exc


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
