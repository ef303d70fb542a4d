"""Utility functions for kubetop."""

from kubetop.utils.formatting import (
    format_age,
    format_bytes,
    format_cpu,
    format_duration,
    format_percentage,
    format_timestamp,
    render_cpu_limit,
    render_limit,
    render_memory_limit,
)
from kubetop.utils.resource_parser import (
    cpu_to_millicores,
    memory_str_to_bytes,
    parse_quantity,
)

__all__ = [
    "cpu_to_millicores",
    "format_age",
    "format_bytes",
    "format_cpu",
    "format_duration",
    "format_percentage",
    "format_timestamp",
    "memory_str_to_bytes",
    "parse_quantity",
    "render_cpu_limit",
    "render_limit",
    "render_memory_limit",
]
