"""Pytest configuration and fixtures for har-extractor tests."""

from __future__ import annotations

import gzip
import json
import logging
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def sample_har_entry():
    """Create a sample HAR entry for testing."""

    def _create_entry(
        url: str = "http://example.com/",
        content: str = "",
        encoding: str | None = None,
        method: str = "GET",
        status: int = 200,
        mime_type: str = "text/html",
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"size": len(content), "mimeType": mime_type, "text": content}
        if encoding is not None:
            body["encoding"] = encoding
        return {
            "startedDateTime": "2024-01-01T00:00:00.000Z",
            "time": 12.5,
            "request": {
                "method": method,
                "url": url,
                "httpVersion": "HTTP/1.1",
                "headers": [],
                "cookies": [],
            },
            "response": {
                "status": status,
                "statusText": "OK",
                "headers": [],
                "content": body,
            },
        }

    return _create_entry


@pytest.fixture
def har_document():
    """Build a HAR document dict around a list of entries."""

    def _create_document(entries: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        return {
            "log": {
                "version": "1.2",
                "creator": {"name": "test", "version": "1.0"},
                "pages": [],
                "entries": entries or [],
            }
        }

    return _create_document


@pytest.fixture
def temp_har_file(tmp_path: Path, har_document):
    """Write a HAR file (optionally gzipped) to a temporary directory."""

    def _create_har(
        entries: list[dict[str, Any]] | None = None,
        name: str = "capture.har",
        compress: bool = False,
    ) -> Path:
        data = json.dumps(har_document(entries)).encode("utf-8")
        har_path = tmp_path / name
        if compress:
            har_path.write_bytes(gzip.compress(data))
        else:
            har_path.write_bytes(data)
        return har_path

    return _create_har


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty output directory for extracted files."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handler, level and propagation changes made by CLI runs."""
    logger = logging.getLogger("har_extractor")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
