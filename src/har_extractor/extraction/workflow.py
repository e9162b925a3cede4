"""Extraction workflow orchestration.

This module ties the streaming reader to the materializer, separated from
CLI concerns for testability. Errors are isolated per HAR file: the first
failure stops that file and is recorded on its result, and the next file
is still processed.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from har_extractor.extraction.errors import ExtractionError, FilesystemError
from har_extractor.extraction.materializer import (
    STATUS_DRY_RUN,
    STATUS_SKIPPED,
    STATUS_WRITTEN,
    materialize_entry,
)
from har_extractor.extraction.options import ExtractOptions
from har_extractor.extraction.reader import EntryReader

_LOGGER = logging.getLogger(__name__)


@dataclass
class ExtractResult:
    """Result of extracting one HAR file.

    Attributes:
        har_path: HAR file that was processed (None for a bare stream)
        opened: False if the file could not be opened
        processed: Entries handled successfully before any error, skips included
        written: Files written
        skipped: Entries skipped by the host allowlist
        dry_run: Entries resolved without writing in dry-run mode
        error: Error that stopped processing, if any
    """

    har_path: Path | None = None
    opened: bool = True
    processed: int = 0
    written: int = 0
    skipped: int = 0
    dry_run: int = 0
    error: ExtractionError | None = None

    @property
    def success(self) -> bool:
        """True if every entry of the file was processed."""
        return self.error is None


def extract_stream(
    stream: IO[bytes],
    options: ExtractOptions,
    *,
    har_path: Path | None = None,
) -> ExtractResult:
    """Extract every entry of a HAR document read from a binary stream.

    Args:
        stream: Readable binary stream holding the HAR JSON
        options: Extraction options
        har_path: Source file, recorded on the result

    Returns:
        ExtractResult; ``error`` is set if processing stopped early
    """
    result = ExtractResult(har_path=har_path)
    try:
        for entry in EntryReader(stream):
            outcome = materialize_entry(entry, options)
            if outcome.status == STATUS_WRITTEN:
                result.written += 1
            elif outcome.status == STATUS_SKIPPED:
                result.skipped += 1
            elif outcome.status == STATUS_DRY_RUN:
                result.dry_run += 1
            result.processed += 1
    except ExtractionError as e:
        _LOGGER.debug("Stopped after %d entries: %s", result.processed, e)
        result.error = e
    return result


def open_har(path: Path) -> IO[bytes]:
    """Open a HAR file for binary reading, decompressing ``.gz`` files."""
    if path.suffix == ".gz":
        return gzip.open(path, "rb")
    return open(path, "rb")


def extract_har_file(path: str | Path, options: ExtractOptions) -> ExtractResult:
    """Extract every entry of a HAR file on disk.

    Args:
        path: Path to a .har or .har.gz file
        options: Extraction options

    Returns:
        ExtractResult for the file; ``opened`` is False if it could not be opened
    """
    path = Path(path)
    try:
        stream = open_har(path)
    except OSError as e:
        return ExtractResult(
            har_path=path,
            opened=False,
            error=FilesystemError(f"Failed to open {path}: {e}", str(path)),
        )

    with stream:
        result = extract_stream(stream, options, har_path=path)

    _LOGGER.debug(
        "%s: %d processed, %d written, %d skipped", path, result.processed, result.written, result.skipped
    )
    return result


def extract_har_files(paths: Iterable[str | Path], options: ExtractOptions) -> list[ExtractResult]:
    """Extract several HAR files one after another.

    A failure in one file never prevents the remaining files from being
    processed.

    Args:
        paths: HAR files to process, in order
        options: Extraction options

    Returns:
        One ExtractResult per path, in the same order
    """
    return [extract_har_file(path, options) for path in paths]
