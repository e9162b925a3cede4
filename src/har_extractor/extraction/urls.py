"""URL parsing and destination path derivation."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, replace
from pathlib import Path
from urllib.parse import unquote, urlsplit

from har_extractor.extraction.errors import InvalidURLError

# File name used when the URL path ends in a slash or is empty
INDEX_NAME = "index"

_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_UNSAFE_NAME_RE = re.compile(r"[/\\]")


@dataclass(frozen=True)
class ParsedURL:
    """The parts of a request URL used to place its body on disk.

    Attributes:
        host: Host with optional port, without user info
        path: Percent-decoded path, empty for opaque URLs such as ``data:``
        query: Raw query string without the leading ``?``
    """

    host: str
    path: str
    query: str = ""

    def without_query(self) -> ParsedURL:
        """Return a copy with the query string cleared."""
        return replace(self, query="")


def parse_url(raw: str) -> ParsedURL:
    """Parse a request URL.

    Args:
        raw: URL as recorded in the HAR entry

    Returns:
        ParsedURL with host, decoded path and raw query

    Raises:
        InvalidURLError: If the URL contains control characters, a malformed
            IPv6 host, a non-numeric port, or an invalid percent escape

    Example:
        >>> parse_url("https://user@example.com:8443/a%20b?x=1")
        ParsedURL(host='example.com:8443', path='/a b', query='x=1')
    """
    if _CONTROL_CHAR_RE.search(raw):
        raise InvalidURLError(raw, "invalid control character in URL")

    try:
        parts = urlsplit(raw)
        # port is validated lazily
        _ = parts.port
    except ValueError as e:
        raise InvalidURLError(raw, str(e)) from e

    host = parts.netloc.rpartition("@")[2]
    if host in (".", ".."):
        # The host becomes a directory name under the output root
        raise InvalidURLError(raw, f"invalid host {host!r}")

    path = parts.path
    if parts.scheme and not parts.netloc and not path.startswith("/"):
        # Opaque URL (data:, mailto:, about:blank) has no hierarchical path
        path = ""

    for component in (host, path):
        if _BAD_ESCAPE_RE.search(component):
            raise InvalidURLError(raw, f"invalid URL escape in {component!r}")

    return ParsedURL(
        host=host,
        path=unquote(path, errors="surrogateescape"),
        query=parts.query,
    )


def safe_file_name(name: str) -> str:
    """Replace path separators so a name cannot create subdirectories.

    Example:
        >>> safe_file_name("a/b\\\\c")
        'a-b-c'
    """
    return _UNSAFE_NAME_RE.sub("-", name)


def destination_for(url: ParsedURL, root: Path, *, remove_query_string: bool = False) -> tuple[Path, Path]:
    """Compute where a response body is written.

    The directory mirrors the URL host and the directories of its path. The
    file is named after the last path segment, or ``index`` when there is
    none, followed by ``?query`` unless the query is removed.

    Args:
        url: Parsed request URL
        root: Output root directory
        remove_query_string: Drop the query from the file name

    Returns:
        Tuple of (directory, file path)

    Example:
        >>> destination_for(parse_url("https://example.com/js/app.js?v=2"), Path("out"))
        (PosixPath('out/example.com/js'), PosixPath('out/example.com/js/app.js?v=2'))
    """
    if remove_query_string:
        url = url.without_query()

    directory, _, name = url.path.rpartition("/")
    if name in (".", ".."):
        directory, name = f"{directory}/{name}", ""

    # Anchored at "/" so ".." segments cannot climb above the host directory
    relative_dir = posixpath.normpath("/" + directory).lstrip("/")
    dir_path = root / url.host / relative_dir if relative_dir else root / url.host

    name = name or INDEX_NAME
    if url.query:
        name = f"{name}?{url.query}"

    return dir_path, dir_path / safe_file_name(name)
