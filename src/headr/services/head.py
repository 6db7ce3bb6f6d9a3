"""HeadService — walks the declared sources and renders each one.

Open failures are reported to stderr and recorded as a failed
SourceResult; the loop moves on. Read failures on an open stream raise
:class:`headr.errors.ReadError` and end the run. Write failures on stdout
propagate as the original ``OSError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO, TextIO

import click

from headr import PROG_NAME
from headr.config.models import ByteMode
from headr.infrastructure.sources import open_source
from headr.output.renderers import format_header, render_bytes, render_lines
from headr.services.result import RunReport, SourceResult

if TYPE_CHECKING:
    from headr.config.models import HeadConfig
    from headr.infrastructure.sources import OpenedSource

logger = logging.getLogger(__name__)


class HeadService:
    """Run head over every source of a :class:`HeadConfig`.

    Usage::

        report = HeadService(config).run(stdout=out, stderr=err)
    """

    def __init__(self, config: HeadConfig, *, prog_name: str = PROG_NAME) -> None:
        self._config = config
        self._prog_name = prog_name

    def run(self, *, stdout: BinaryIO, stderr: TextIO) -> RunReport:
        """Process each source in order and return one result per source."""
        logger.debug(
            "Starting run: %d source(s), mode=%s count=%d",
            len(self._config.files),
            self._config.mode.kind,
            self._config.mode.count,
        )
        results: list[SourceResult] = []
        for index, identifier in enumerate(self._config.files):
            opened = open_source(identifier)
            if not opened.ok:
                click.echo(f"{self._prog_name}: {identifier}: {opened.error}", file=stderr)
                results.append(
                    SourceResult(index=index, identifier=identifier, ok=False, error=opened.error)
                )
                continue
            try:
                written = self._render(index, opened, stdout)
            finally:
                opened.close()
            results.append(SourceResult(index=index, identifier=identifier, ok=True, written=written))

        report = RunReport(results=results)
        logger.debug(
            "Run finished: %d written, %d failed", report.written, len(report.failed)
        )
        return report

    def _render(self, index: int, opened: OpenedSource, stdout: BinaryIO) -> int:
        if self._config.multiple:
            stdout.write(format_header(opened.identifier, index))
        assert opened.stream is not None
        mode = self._config.mode
        if isinstance(mode, ByteMode):
            return render_bytes(opened.stream, mode.count, stdout, identifier=opened.identifier)
        return render_lines(opened.stream, mode.count, stdout, identifier=opened.identifier)
