"""Streaming reader for the entries array of a HAR document.

HAR captures routinely run to hundreds of megabytes, mostly base64 bodies,
so the document is never loaded whole. The reader walks ``ijson`` parser
events until the first object key named ``entries`` and then decodes the
array one element at a time.

The key search is a flat scan: nesting is not tracked, so the first key
called ``entries`` anywhere in the document is used even when it is not
``log.entries``. Well-formed HAR files put ``log.entries`` before any body
content, but a ``request`` or ``response`` object carrying its own
``entries`` field ahead of it would be picked up instead.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from collections.abc import Iterator
from typing import IO, Any

import ijson
from ijson.common import JSONError, ObjectBuilder

from har_extractor.extraction.entry import Entry
from har_extractor.extraction.errors import FilesystemError, MalformedInputError

_LOGGER = logging.getLogger(__name__)

ENTRIES_KEY = "entries"

_CONTAINER_START = frozenset({"start_map", "start_array"})
_CONTAINER_END = frozenset({"end_map", "end_array"})


def _build_element(event: str, value: Any, events: Iterator[tuple[str, Any]]) -> Any:
    """Assemble one complete JSON value starting at the given event.

    Args:
        event: First event of the value
        value: Payload of the first event
        events: Remaining parser events, consumed up to the end of the value

    Returns:
        The decoded value (dict, list, or scalar)
    """
    builder = ObjectBuilder()
    builder.event(event, value)
    if event not in _CONTAINER_START:
        return builder.value

    depth = 1
    for event, value in events:
        builder.event(event, value)
        if event in _CONTAINER_START:
            depth += 1
        elif event in _CONTAINER_END:
            depth -= 1
            if depth == 0:
                return builder.value

    raise MalformedInputError("unexpected end of input inside entry", ENTRIES_KEY)


class EntryReader:
    """Lazy, single-pass iterator over the entries of a HAR stream.

    Attributes:
        count: Number of entries produced so far

    Example:
        >>> import io
        >>> reader = EntryReader(io.BytesIO(b'{"log": {"entries": [{}]}}'))
        >>> [entry.request.url for entry in reader]
        ['']
        >>> reader.count
        1
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self.count = 0
        self._entries = self._read(stream)

    def __iter__(self) -> EntryReader:
        return self

    def __next__(self) -> Entry:
        return next(self._entries)

    def _read(self, stream: IO[bytes]) -> Iterator[Entry]:
        try:
            events = iter(ijson.basic_parse(stream, use_float=True))

            for event, value in events:
                if event == "map_key" and value == ENTRIES_KEY:
                    break
            else:
                raise MalformedInputError(f"no '{ENTRIES_KEY}' key found")

            _LOGGER.debug("Found '%s' key, reading array", ENTRIES_KEY)

            event, _ = next(events, ("eof", None))
            if event != "start_array":
                raise MalformedInputError(f"'{ENTRIES_KEY}' must be an array, got {event}", ENTRIES_KEY)

            for event, value in events:
                if event == "end_array":
                    _LOGGER.debug("Read %d entries", self.count)
                    return
                entry = Entry.from_dict(_build_element(event, value, events))
                self.count += 1
                yield entry

            raise MalformedInputError(f"unterminated '{ENTRIES_KEY}' array", ENTRIES_KEY)
        except JSONError as e:
            raise MalformedInputError(f"invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"invalid UTF-8 in document: {e}") from e
        except (gzip.BadGzipFile, EOFError, zlib.error) as e:
            raise MalformedInputError(f"invalid gzip data: {e}") from e
        except OSError as e:
            raise FilesystemError(f"Failed to read HAR data: {e}", getattr(e, "filename", None)) from e


def iter_entries(stream: IO[bytes]) -> Iterator[Entry]:
    """Yield the entries of a HAR document read from a binary stream.

    Args:
        stream: Readable binary stream holding the HAR JSON

    Yields:
        One Entry per element of the first ``entries`` array

    Raises:
        MalformedInputError: If no ``entries`` array is found, or the
            document is not valid JSON up to the end of that array
    """
    return EntryReader(stream)
