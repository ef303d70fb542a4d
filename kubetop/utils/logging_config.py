"""Logging configuration setup.

The TUI owns the terminal, so records go to a file instead of stderr.
"""

from __future__ import annotations

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any

VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

BASE_LOG_CFG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple_file": {
            "format": "%(asctime)s - %(name)35s:%(lineno)-4d - %(levelname)-7s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "file_handler": {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "simple_file",
            "filename": "kubetop.log",
            "encoding": "utf-8",
        },
    },
    "loggers": {
        "kubetop": {
            "handlers": ["file_handler"],
            "propagate": False,
            "level": "WARNING",
        },
        "textual": {
            "handlers": ["file_handler"],
            "propagate": False,
            "level": "WARNING",
        },
    },
    "root": {
        "handlers": ["file_handler"],
        "level": "WARNING",
    },
}


def normalize_log_level(level: str) -> str:
    """Return the upper-cased level, falling back to WARNING when unknown."""
    candidate = (level or "").upper()
    return candidate if candidate in VALID_LOG_LEVELS else "WARNING"


def build_logging_config(log_file: Path, level: str) -> dict[str, Any]:
    """Build a dictConfig payload writing the kubetop loggers to ``log_file``."""
    log_cfg: dict[str, Any] = copy.deepcopy(BASE_LOG_CFG)
    log_cfg["handlers"]["file_handler"]["filename"] = str(log_file)
    log_cfg["loggers"]["kubetop"]["level"] = level
    if level == "DEBUG":
        log_cfg["root"]["level"] = level
    return log_cfg


def setup_logging(log_file: Path, level: str) -> str:
    """Set up the logging system.

    Args:
        log_file: Destination file; parent directories are created.
        level: Desired level name (case-insensitive).

    Returns:
        The validated log level.
    """
    validated = normalize_log_level(level)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_file, validated))
    logging.getLogger(__name__).debug("Logging initialized at %s into %s", validated, log_file)
    return validated
