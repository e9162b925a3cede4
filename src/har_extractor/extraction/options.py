"""Extraction options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def parse_allowed_hosts(value: str | None) -> frozenset[str]:
    """Parse a comma-separated host allowlist.

    Args:
        value: Hosts separated by commas, e.g. "example.com,example.org:8080"

    Returns:
        Set of hosts; empty means every host is allowed

    Example:
        >>> sorted(parse_allowed_hosts("example.com, example.org,"))
        ['example.com', 'example.org']
    """
    if not value:
        return frozenset()
    return frozenset(host.strip() for host in value.split(",") if host.strip())


@dataclass(frozen=True)
class ExtractOptions:
    """Options shared by every entry of a run.

    Attributes:
        output_dir: Root directory for extracted files
        remove_query_string: Leave query strings out of file names
        dry_run: Compute and log destinations without touching the filesystem
        verbose: Log each destination path
        allowed_hosts: Hosts to extract (host[:port], exact match); empty allows all
    """

    output_dir: Path = field(default_factory=lambda: Path("."))
    remove_query_string: bool = False
    dry_run: bool = False
    verbose: bool = False
    allowed_hosts: frozenset[str] = frozenset()

    def is_host_allowed(self, host: str) -> bool:
        """Check a URL host against the allowlist."""
        return not self.allowed_hosts or host in self.allowed_hosts
