"""Tests for extraction options."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from har_extractor.extraction.options import ExtractOptions, parse_allowed_hosts

# fmt: off
ALLOWED_HOSTS_CASES = [
    ("",                                    set(),                               "empty"),
    (None,                                  set(),                               "none"),
    ("example.com",                         {"example.com"},                     "single"),
    ("example.com,example.org",             {"example.com", "example.org"},      "two"),
    (" example.com , example.org ",         {"example.com", "example.org"},      "whitespace"),
    ("example.com,,",                       {"example.com"},                     "empty_items"),
    ("example.com:8080",                    {"example.com:8080"},                "with_port"),
]
# fmt: on


class TestParseAllowedHosts:
    """Tests for parse_allowed_hosts."""

    @pytest.mark.parametrize(
        ("value", "expected", "desc"),
        ALLOWED_HOSTS_CASES,
        ids=[c[2] for c in ALLOWED_HOSTS_CASES],
    )
    def test_parse(self, value: str | None, expected: set[str], desc: str) -> None:
        """Test comma-separated hosts are split into a set."""
        assert parse_allowed_hosts(value) == frozenset(expected)


class TestExtractOptions:
    """Tests for ExtractOptions."""

    def test_default_values(self) -> None:
        """Test default values."""
        options = ExtractOptions()
        assert options.output_dir == Path(".")
        assert options.remove_query_string is False
        assert options.dry_run is False
        assert options.verbose is False
        assert options.allowed_hosts == frozenset()

    def test_empty_allowlist_allows_all(self) -> None:
        """Test every host passes an empty allowlist."""
        assert ExtractOptions().is_host_allowed("anything.test") is True
        assert ExtractOptions().is_host_allowed("") is True

    def test_allowlist_membership(self) -> None:
        """Test only listed hosts pass a non-empty allowlist."""
        options = ExtractOptions(allowed_hosts=frozenset({"example.com"}))
        assert options.is_host_allowed("example.com") is True
        assert options.is_host_allowed("example.org") is False

    def test_frozen(self) -> None:
        """Test options cannot be changed once built."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ExtractOptions().dry_run = True  # type: ignore[misc]
