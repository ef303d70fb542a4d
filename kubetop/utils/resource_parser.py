"""Resource parsing utilities for CPU and memory quantities.

Provides functions to parse Kubernetes quantity strings into integers:
- CPU: parsed to millicores, rounded up like the API server does
- Memory: parsed to bytes, rounded up
"""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Any

# Module-level constants to avoid re-creating on every function call.
# Binary suffixes must be checked before the decimal ones sharing a letter.
_QUANTITY_MULTIPLIERS: tuple[tuple[str, Decimal], ...] = (
    ("Ki", Decimal(1024)),
    ("Mi", Decimal(1024**2)),
    ("Gi", Decimal(1024**3)),
    ("Ti", Decimal(1024**4)),
    ("Pi", Decimal(1024**5)),
    ("Ei", Decimal(1024**6)),
    ("n", Decimal("1e-9")),
    ("u", Decimal("1e-6")),
    ("m", Decimal("1e-3")),
    ("k", Decimal(10**3)),
    ("M", Decimal(10**6)),
    ("G", Decimal(10**9)),
    ("T", Decimal(10**12)),
    ("P", Decimal(10**15)),
    ("E", Decimal(10**18)),
)


def parse_quantity(quantity: Any) -> Decimal:
    """Parse a Kubernetes quantity string into an exact decimal.

    Handles binary ("512Mi"), decimal ("1G"), fractional ("100m",
    "500000000n") and plain ("1.5", "2") notations.

    Args:
        quantity: Quantity value as string (or number).

    Returns:
        The quantity in base units. Returns 0 on parse error or empty input.
    """
    if quantity is None or quantity == "":
        return Decimal(0)

    text = str(quantity).strip()

    for suffix, mult in _QUANTITY_MULTIPLIERS:
        if text.endswith(suffix):
            try:
                return Decimal(text[: -len(suffix)]) * mult
            except InvalidOperation:
                return Decimal(0)

    try:
        return Decimal(text)
    except InvalidOperation:
        return Decimal(0)


def cpu_to_millicores(cpu_str: Any) -> int:
    """Convert CPU string to whole millicores, rounding up.

    Args:
        cpu_str: CPU value as string (e.g., "250m", "1", "123456n")

    Returns:
        Millicores as int. Returns 0 on parse error or empty string.
    """
    millis = parse_quantity(cpu_str) * 1000
    return int(millis.to_integral_value(rounding=ROUND_CEILING))


def memory_str_to_bytes(memory_str: Any) -> int:
    """Convert memory string to whole bytes, rounding up.

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi", "128974848")

    Returns:
        Memory value in bytes as int. Returns 0 on parse error or empty string.
    """
    value = parse_quantity(memory_str)
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def parse_cpu_from_dict(values: dict[str, Any], container_type: str) -> int:
    """Parse CPU value from a container spec.

    Utility function to extract and parse CPU from a structure like:
    {"resources": {"limits": {"cpu": "100m"}}}

    Args:
        values: Container dictionary
        container_type: Key for container resources ("limits" or "requests")

    Returns:
        Parsed CPU value in millicores. Returns 0 when absent or malformed.
    """
    resources = _container_resources(values, container_type)
    return cpu_to_millicores(resources.get("cpu", ""))


def parse_memory_from_dict(values: dict[str, Any], container_type: str) -> int:
    """Parse memory value from a container spec.

    Utility function to extract and parse memory from a structure like:
    {"resources": {"limits": {"memory": "512Mi"}}}

    Args:
        values: Container dictionary
        container_type: Key for container resources ("limits" or "requests")

    Returns:
        Parsed memory value in bytes. Returns 0 when absent or malformed.
    """
    resources = _container_resources(values, container_type)
    return memory_str_to_bytes(resources.get("memory", ""))


def _container_resources(values: Any, container_type: str) -> dict[str, Any]:
    if not isinstance(values, dict):
        return {}
    resources = values.get("resources") or {}
    if not isinstance(resources, dict):
        return {}
    container_resources = resources.get(container_type) or {}
    if not isinstance(container_resources, dict):
        return {}
    return container_resources
