"""Write decoded HAR entries to disk."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from pathlib import Path

from har_extractor.extraction.entry import Content, Entry
from har_extractor.extraction.errors import EncodingError, FilesystemError
from har_extractor.extraction.options import ExtractOptions
from har_extractor.extraction.urls import destination_for, parse_url

_LOGGER = logging.getLogger(__name__)

STATUS_WRITTEN = "written"
STATUS_SKIPPED = "skipped"
STATUS_DRY_RUN = "dry_run"


@dataclass(frozen=True)
class MaterializedEntry:
    """Outcome of materializing one entry.

    Attributes:
        url: Request URL of the entry
        status: One of "written", "skipped" (host not allowed) or "dry_run"
        path: Destination file path (None when skipped)
    """

    url: str
    status: str
    path: Path | None = None


def decode_content(content: Content) -> bytes:
    """Return the body bytes of a recorded response.

    Args:
        content: Recorded response content

    Returns:
        Base64-decoded bytes when the content is base64 encoded,
        otherwise the UTF-8 bytes of the text

    Raises:
        EncodingError: If base64 content is invalid
    """
    if content.is_base64:
        # Line breaks are tolerated, anything else outside the alphabet is not
        text = content.text.replace("\r", "").replace("\n", "")
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise EncodingError(f"Invalid base64 content: {e}") from e
    return content.text.encode("utf-8", errors="replace")


def materialize_entry(entry: Entry, options: ExtractOptions) -> MaterializedEntry:
    """Write the response body of one entry under the output directory.

    The file lands at ``<output_dir>/<host>/<path>``. Entries whose host is
    not in a non-empty allowlist are skipped without error. A later entry
    mapping to the same file overwrites an earlier one.

    Args:
        entry: Decoded HAR entry
        options: Extraction options

    Returns:
        MaterializedEntry describing what happened

    Raises:
        InvalidURLError: If the request URL cannot be parsed
        FilesystemError: If the directory or file cannot be created or written
        EncodingError: If base64 content is invalid (the created file is kept)
    """
    raw_url = entry.request.url
    url = parse_url(raw_url)

    if not options.is_host_allowed(url.host):
        _LOGGER.debug("Skipping %s: host %r not allowed", raw_url, url.host)
        return MaterializedEntry(url=raw_url, status=STATUS_SKIPPED)

    dir_path, file_path = destination_for(
        url, options.output_dir, remove_query_string=options.remove_query_string
    )

    if not options.dry_run:
        # ValueError covers NUL bytes and unencodable characters in the path
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise FilesystemError(f"Failed to create directory {dir_path}: {e}", str(dir_path)) from e

    if options.verbose:
        _LOGGER.info("Processing: %s", file_path)

    if options.dry_run:
        return MaterializedEntry(url=raw_url, status=STATUS_DRY_RUN, path=file_path)

    try:
        with open(file_path, "wb") as f:
            f.write(decode_content(entry.response.content))
    except (OSError, ValueError) as e:
        raise FilesystemError(f"Failed to write {file_path}: {e}", str(file_path)) from e

    return MaterializedEntry(url=raw_url, status=STATUS_WRITTEN, path=file_path)
