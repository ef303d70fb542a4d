"""Application settings models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from kubetop.constants.defaults import LOG_FILE_DEFAULT, LOG_LEVEL_DEFAULT
from kubetop.constants.limits import LOG_TAIL_LINES, MAX_POD_EVENTS, REFRESH_INTERVAL_MIN
from kubetop.constants.timeouts import REFRESH_INTERVAL


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Cluster access
    kubeconfig: str = ""
    context: str = ""
    namespace: str = ""

    # Dashboard
    default_view: Literal["pods", "nodes", "events"] = "pods"
    refresh_interval: float = Field(default=REFRESH_INTERVAL, ge=REFRESH_INTERVAL_MIN)  # seconds
    log_tail_lines: int = Field(default=LOG_TAIL_LINES, ge=1)
    max_pod_events: int = Field(default=MAX_POD_EVENTS, ge=0)

    # Fetch errors stop the dashboard unless disabled
    exit_on_fetch_error: bool = True

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = str(LOG_FILE_DEFAULT)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
