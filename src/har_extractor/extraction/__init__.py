"""Streaming extraction of HAR response bodies to disk.

Exports:
    - EntryReader / iter_entries: Stream entries out of a HAR document
    - materialize_entry: Write one entry's response body to disk
    - extract_har_file / extract_har_files: Process whole HAR files
    - ExtractOptions: Options shared by a run
"""

from __future__ import annotations

from har_extractor.extraction.entry import (
    BASE64_ENCODING,
    Content,
    Entry,
    Request,
    Response,
)
from har_extractor.extraction.errors import (
    EncodingError,
    ExtractionError,
    FilesystemError,
    InvalidURLError,
    MalformedInputError,
)
from har_extractor.extraction.materializer import (
    MaterializedEntry,
    decode_content,
    materialize_entry,
)
from har_extractor.extraction.options import ExtractOptions, parse_allowed_hosts
from har_extractor.extraction.reader import EntryReader, iter_entries
from har_extractor.extraction.urls import (
    ParsedURL,
    destination_for,
    parse_url,
    safe_file_name,
)
from har_extractor.extraction.workflow import (
    ExtractResult,
    extract_har_file,
    extract_har_files,
    extract_stream,
)

__all__ = [
    # Entry model
    "Entry",
    "Request",
    "Response",
    "Content",
    "BASE64_ENCODING",
    # Reading
    "EntryReader",
    "iter_entries",
    # Writing
    "materialize_entry",
    "decode_content",
    "MaterializedEntry",
    "ParsedURL",
    "parse_url",
    "destination_for",
    "safe_file_name",
    # Workflow
    "ExtractOptions",
    "parse_allowed_hosts",
    "ExtractResult",
    "extract_stream",
    "extract_har_file",
    "extract_har_files",
    # Errors
    "ExtractionError",
    "MalformedInputError",
    "InvalidURLError",
    "FilesystemError",
    "EncodingError",
]
