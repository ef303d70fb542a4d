"""Display formatting helpers for table cells and detail panes."""

from __future__ import annotations

from datetime import datetime, timedelta

from kubetop.constants.values import TIMESTAMP_FORMAT

_BYTE_UNIT = 1024
_BYTE_PREFIXES = "KMGTPE"


def format_bytes(value: int) -> str:
    """Format a byte count with binary prefixes and no decimals.

    Examples: 512 -> "512B", 1048576 -> "1Mi", 1536 -> "2Ki".
    """
    if value < _BYTE_UNIT:
        return f"{value}B"

    div, exp = _BYTE_UNIT, 0
    n = value // _BYTE_UNIT
    while n >= _BYTE_UNIT:
        div *= _BYTE_UNIT
        exp += 1
        n //= _BYTE_UNIT

    return f"{value / div:.0f}{_BYTE_PREFIXES[exp]}i"


def format_cpu(millicores: int) -> str:
    return f"{millicores}m"


def format_duration(duration: timedelta) -> str:
    """Format an age as a single coarse unit.

    More than a year renders in years, more than 120 hours in days, more
    than 10 hours in hours, more than 10 minutes in minutes, anything else
    in seconds.
    """
    seconds = duration.total_seconds()
    hours = seconds / 3600

    if hours > 24 * 365:
        return f"{hours / (24 * 365):.0f}y"
    if hours > 120:
        return f"{hours / 24:.0f}d"
    if hours > 10:
        return f"{hours:.0f}h"
    if seconds / 60 > 10:
        return f"{seconds / 60:.0f}m"
    return f"{seconds:.0f}s"


def format_age(timestamp: datetime | None, now: datetime) -> str:
    if timestamp is None:
        return "-"
    return format_duration(now - timestamp)


def format_percentage(used: int, total: int) -> str:
    """Return used/total as "25.00%", or "-" when the total is unknown."""
    if total <= 0:
        return "-"
    return f"{used * 100.0 / total:.2f}%"


def format_timestamp(timestamp: datetime | None) -> str:
    if timestamp is None:
        return "-"
    return timestamp.strftime(TIMESTAMP_FORMAT)


def render_limit(formatted: str, limit: int, limit_count: int, container_count: int) -> str:
    """Render an aggregate resource limit.

    A pod whose containers do not all declare a limit gets the number of
    declaring containers appended, so a usage above the summed limit is
    not mistaken for a breach.

    Args:
        formatted: The limit already formatted for display.
        limit: Raw summed limit; 0 means no container declares one.
        limit_count: Number of containers declaring the limit.
        container_count: Number of containers in the pod.

    Returns:
        "-", the formatted value, or "value (count)".
    """
    if limit == 0:
        return "-"
    if limit_count == container_count:
        return formatted
    return f"{formatted} ({limit_count})"


def render_cpu_limit(millicores: int, limit_count: int = 1, container_count: int = 1) -> str:
    return render_limit(format_cpu(millicores), millicores, limit_count, container_count)


def render_memory_limit(value: int, limit_count: int = 1, container_count: int = 1) -> str:
    return render_limit(format_bytes(value), value, limit_count, container_count)
