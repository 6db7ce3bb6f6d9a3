"""Write the requested prefix of a stream to a binary output.

Line mode is byte-exact: terminators are copied as read and nothing is
appended. Byte mode decodes the prefix as UTF-8, replacing invalid
sequences with U+FFFD, and writes the re-encoded text.

Only failures reading the source become :class:`ReadError`; failures
writing *out* propagate unchanged.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from headr.errors import ReadError
from headr.infrastructure.sources import os_error_text

ENCODING = "utf-8"


def format_header(identifier: str, position: int) -> bytes:
    """Return the ``==> name <==`` header for the source at *position*.

    Every header after position 0 starts with a blank line.
    """
    prefix = "\n" if position > 0 else ""
    text = f"{prefix}==> {identifier} <==\n"
    return text.encode(ENCODING, errors="surrogateescape")


def render_lines(stream: BinaryIO, count: int, out: BinaryIO, *, identifier: str) -> int:
    """Copy up to *count* lines from *stream* to *out*. Returns bytes written."""
    written = 0
    for _ in range(count):
        try:
            line = stream.readline()
        except OSError as exc:
            raise ReadError(identifier, os_error_text(exc)) from exc
        if not line:
            break
        out.write(line)
        out.flush()
        written += len(line)
    return written


def read_prefix(stream: BinaryIO, count: int, *, identifier: str) -> bytes:
    """Read at most *count* bytes, in buffer-sized chunks.

    *count* may exceed anything addressable, so it is never handed to
    ``read()`` directly.
    """
    chunks: list[bytes] = []
    remaining = count
    while remaining > 0:
        try:
            chunk = stream.read(min(remaining, io.DEFAULT_BUFFER_SIZE))
        except OSError as exc:
            raise ReadError(identifier, os_error_text(exc)) from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def render_bytes(stream: BinaryIO, count: int, out: BinaryIO, *, identifier: str) -> int:
    """Copy at most *count* bytes from *stream* to *out*, lossily decoded.

    Returns the number of bytes written, which may differ from the bytes
    read when replacement characters were substituted.
    """
    text = read_prefix(stream, count, identifier=identifier).decode(ENCODING, errors="replace")
    data = text.encode(ENCODING)
    out.write(data)
    out.flush()
    return len(data)
