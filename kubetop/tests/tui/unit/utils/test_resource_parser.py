"""Tests for resource parser utilities."""

from __future__ import annotations

from decimal import Decimal

from kubetop.utils.resource_parser import (
    cpu_to_millicores,
    memory_str_to_bytes,
    parse_cpu_from_dict,
    parse_memory_from_dict,
    parse_quantity,
)


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_binary_suffixes(self) -> None:
        """Test binary suffixes are powers of 1024."""
        assert parse_quantity("1Ki") == Decimal(1024)
        assert parse_quantity("2Mi") == Decimal(2 * 1024**2)
        assert parse_quantity("1Gi") == Decimal(1024**3)

    def test_decimal_suffixes(self) -> None:
        """Test decimal suffixes are powers of 1000."""
        assert parse_quantity("1k") == Decimal(1000)
        assert parse_quantity("1M") == Decimal(10**6)
        assert parse_quantity("1G") == Decimal(10**9)

    def test_fractional_suffixes(self) -> None:
        """Test milli, micro and nano suffixes."""
        assert parse_quantity("250m") == Decimal("0.25")
        assert parse_quantity("500u") == Decimal("0.0005")
        assert parse_quantity("5n") == Decimal("5e-9")

    def test_plain_and_invalid(self) -> None:
        """Test plain numbers and unparsable input."""
        assert parse_quantity("1.5") == Decimal("1.5")
        assert parse_quantity("") == Decimal(0)
        assert parse_quantity(None) == Decimal(0)
        assert parse_quantity("lots") == Decimal(0)
        assert parse_quantity("xMi") == Decimal(0)


class TestCpuToMillicores:
    """Tests for cpu_to_millicores function."""

    def test_whole_cores(self) -> None:
        assert cpu_to_millicores("2") == 2000

    def test_millicores(self) -> None:
        assert cpu_to_millicores("150m") == 150

    def test_nanocores_round_up(self) -> None:
        """Test partial millicores round up."""
        assert cpu_to_millicores("123456n") == 1
        assert cpu_to_millicores("1000001n") == 2

    def test_empty(self) -> None:
        assert cpu_to_millicores("") == 0


class TestMemoryStrToBytes:
    """Tests for memory_str_to_bytes function."""

    def test_memory_str_to_bytes_mebibytes(self) -> None:
        """Test converting Mi to bytes."""
        assert memory_str_to_bytes("512Mi") == 512 * 1024 * 1024

    def test_memory_str_to_bytes_kibibytes(self) -> None:
        """Test converting Ki to bytes."""
        assert memory_str_to_bytes("1024Ki") == 1024 * 1024

    def test_memory_str_to_bytes_plain(self) -> None:
        """Test plain byte counts."""
        assert memory_str_to_bytes("128974848") == 128974848

    def test_memory_str_to_bytes_empty(self) -> None:
        """Test converting empty string."""
        assert memory_str_to_bytes("") == 0


class TestParseFromDict:
    """Tests for parse_cpu_from_dict and parse_memory_from_dict."""

    def test_limits_and_requests(self) -> None:
        """Test parsing limits and requests from a container spec."""
        container = {
            "resources": {
                "requests": {"cpu": "100m", "memory": "64Mi"},
                "limits": {"cpu": "500m", "memory": "128Mi"},
            }
        }
        assert parse_cpu_from_dict(container, "requests") == 100
        assert parse_cpu_from_dict(container, "limits") == 500
        assert parse_memory_from_dict(container, "requests") == 64 * 1024**2
        assert parse_memory_from_dict(container, "limits") == 128 * 1024**2

    def test_missing_resources(self) -> None:
        """Test containers without resources parse to zero."""
        assert parse_cpu_from_dict({}, "limits") == 0
        assert parse_memory_from_dict({"resources": None}, "limits") == 0
        assert parse_cpu_from_dict({"resources": {"limits": "bogus"}}, "limits") == 0
