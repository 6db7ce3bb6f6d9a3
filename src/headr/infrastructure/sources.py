"""Resolve source identifiers to readable byte streams.

INVARIANT: ``-`` is always standard input, even when a file literally
named ``-`` exists in the working directory. Standard input is never
closed by headr.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import BinaryIO

from headr.config.models import STDIN_SENTINEL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenedSource:
    """Outcome of opening one source: a stream, or the OS error text."""

    identifier: str
    stream: BinaryIO | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.stream is not None

    @property
    def is_stdin(self) -> bool:
        return self.identifier == STDIN_SENTINEL

    def close(self) -> None:
        """Close the stream unless it is standard input."""
        if self.stream is not None and not self.is_stdin:
            self.stream.close()


def os_error_text(exc: OSError) -> str:
    """Return the operating system's description of *exc*."""
    return exc.strerror or str(exc)


def open_source(identifier: str) -> OpenedSource:
    """Open *identifier* for buffered binary reading.

    Never raises for filesystem failures; the error text is returned on
    the result instead.
    """
    if identifier == STDIN_SENTINEL:
        logger.debug("Reading standard input")
        return OpenedSource(identifier, stream=sys.stdin.buffer)
    try:
        stream = open(identifier, "rb")  # noqa: SIM115
    except OSError as exc:
        logger.debug("Failed to open %s", identifier, exc_info=True)
        return OpenedSource(identifier, error=os_error_text(exc))
    logger.debug("Opened %s", identifier)
    return OpenedSource(identifier, stream=stream)
