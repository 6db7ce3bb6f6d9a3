"""Exceptions that end a headr run.

All map to exit code 1. Per-source open failures are not exceptions: they
come back from :func:`headr.infrastructure.sources.open_source` as data.
"""

from __future__ import annotations

import click


class HeadrUsageError(click.UsageError):
    """Malformed or conflicting arguments. Raised before any source is read."""

    exit_code = 1


class ReadError(click.ClickException):
    """An I/O failure on a stream that was already open.

    Aborts the whole run; the remaining sources are not processed.
    """

    exit_code = 1

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"{identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason


class WriteError(click.ClickException):
    """stdout rejected a write (disk full, closed descriptor, ...)."""

    exit_code = 1

    def __init__(self, reason: str) -> None:
        super().__init__(f"write error: {reason}")
        self.reason = reason
