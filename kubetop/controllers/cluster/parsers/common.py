"""Helpers shared by the raw-object parsers."""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime
from typing import Any


def parse_timestamp(timestamp: Any) -> datetime | None:
    """Parse kubernetes timestamp strings into aware datetimes."""
    if not isinstance(timestamp, str) or not timestamp:
        return None
    with suppress(ValueError, TypeError):
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    return None


def metadata_name(obj: dict[str, Any]) -> str:
    return (obj.get("metadata") or {}).get("name", "")


def metadata_namespace(obj: dict[str, Any]) -> str:
    return (obj.get("metadata") or {}).get("namespace", "")
