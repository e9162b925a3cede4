"""HAR entry model.

Only the handful of fields needed to write response bodies to disk are
decoded. Unknown fields are ignored and missing or null fields fall back
to empty values, so partially recorded captures still extract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from har_extractor.extraction.errors import MalformedInputError

BASE64_ENCODING = "base64"


def _get_object(data: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    """Return a nested object, treating absent and null as empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MalformedInputError(f"'{key}' must be an object", path)
    return value


def _get_str(data: dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedInputError(f"'{key}' must be a string", path)
    return value


def _get_int(data: dict[str, Any], key: str, path: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(f"'{key}' must be an integer", path)
    return value


@dataclass(frozen=True)
class Content:
    """Recorded response body.

    Attributes:
        size: Body size in bytes as reported by the recorder
        mime_type: Response MIME type
        text: Body text, base64 encoded when ``encoding`` says so
        compression: Bytes saved by compression (unused)
        encoding: Empty, or "base64" for binary bodies
    """

    size: int = 0
    mime_type: str = ""
    text: str = ""
    compression: int = 0
    encoding: str = ""

    @property
    def is_base64(self) -> bool:
        """True if ``text`` holds base64 encoded bytes."""
        return self.encoding == BASE64_ENCODING


@dataclass(frozen=True)
class Request:
    """Recorded request line."""

    method: str = ""
    url: str = ""


@dataclass(frozen=True)
class Response:
    """Recorded response status and body."""

    status: int = 0
    content: Content = field(default_factory=Content)


@dataclass(frozen=True)
class Entry:
    """Single request/response pair from a HAR file."""

    request: Request = field(default_factory=Request)
    response: Response = field(default_factory=Response)

    @classmethod
    def from_dict(cls, data: Any) -> Entry:
        """Decode one element of the HAR ``entries`` array.

        Args:
            data: Decoded JSON value of the element

        Returns:
            Entry with the extracted fields

        Raises:
            MalformedInputError: If the element or one of the known fields
                has the wrong JSON type

        Example:
            >>> entry = Entry.from_dict({"request": {"url": "https://example.com/"}})
            >>> entry.request.url
            'https://example.com/'
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise MalformedInputError("entry must be an object", "entries[]")

        request = _get_object(data, "request", "entry")
        response = _get_object(data, "response", "entry")
        content = _get_object(response, "content", "entry.response")

        return cls(
            request=Request(
                method=_get_str(request, "method", "entry.request"),
                url=_get_str(request, "url", "entry.request"),
            ),
            response=Response(
                status=_get_int(response, "status", "entry.response"),
                content=Content(
                    size=_get_int(content, "size", "entry.response.content"),
                    mime_type=_get_str(content, "mimeType", "entry.response.content"),
                    text=_get_str(content, "text", "entry.response.content"),
                    compression=_get_int(content, "compression", "entry.response.content"),
                    encoding=_get_str(content, "encoding", "entry.response.content"),
                ),
            ),
        )
