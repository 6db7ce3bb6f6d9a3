"""SourceResult and RunReport: what a head run hands back to the CLI.

INVARIANT: every declared source yields exactly one SourceResult, in
declaration order, whether or not it could be opened.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SourceResult(BaseModel):
    """Outcome of processing a single source.

    Attributes:
        index: Position of the source on the command line.
        identifier: File path or ``-``.
        ok: Whether the source was opened and rendered.
        written: Bytes written to stdout for this source, header excluded.
        error: OS error text when the source could not be opened.
    """

    model_config = {"frozen": True}

    index: int
    identifier: str
    ok: bool
    written: int = 0
    error: str | None = None


class RunReport(BaseModel):
    """All per-source results of one run."""

    model_config = {"frozen": True}

    results: list[SourceResult] = Field(default_factory=list)

    @property
    def failed(self) -> list[SourceResult]:
        return [r for r in self.results if not r.ok]

    @property
    def written(self) -> int:
        return sum(r.written for r in self.results)
