"""Error types raised while extracting HAR content."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for errors that abort processing of a HAR file."""


class MalformedInputError(ExtractionError):
    """Raised when the HAR document is not valid JSON or lacks an entries array."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        full_message = message
        if path:
            full_message += f" (at {path})"
        super().__init__(full_message)


class InvalidURLError(ExtractionError):
    """Raised when a request URL cannot be parsed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class FilesystemError(ExtractionError):
    """Raised when a directory or file cannot be created, written or closed."""

    def __init__(self, message: str, filename: str | None = None) -> None:
        self.filename = filename
        super().__init__(message)


class EncodingError(ExtractionError):
    """Raised when base64 response content cannot be decoded."""
