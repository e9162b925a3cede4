"""Extract response bodies from HAR files to disk.

Each response recorded in a HAR (HTTP Archive) capture is written to
``<output>/<host>/<url path>``, so captured traffic can be inspected or
replayed offline. HAR files are streamed, never loaded whole.

Example usage:
    from har_extractor import ExtractOptions, extract_har_file

    result = extract_har_file("capture.har", ExtractOptions(output_dir=Path("out")))
    print(result.processed, result.error)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export public API for convenience
from har_extractor.extraction import (
    EntryReader,
    ExtractionError,
    ExtractOptions,
    ExtractResult,
    extract_har_file,
    extract_har_files,
    materialize_entry,
)

__all__ = [
    "__version__",
    "EntryReader",
    "ExtractOptions",
    "ExtractResult",
    "ExtractionError",
    "extract_har_file",
    "extract_har_files",
    "materialize_entry",
]
