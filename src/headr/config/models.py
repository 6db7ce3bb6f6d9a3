"""Pydantic models for a single head run.

The line/byte choice is a tagged union discriminated on ``kind``: a
configuration holds exactly one mode, so "both set" cannot be represented.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, PositiveInt

STDIN_SENTINEL = "-"
DEFAULT_LINE_COUNT = 10


class LineMode(BaseModel):
    """Print the first ``count`` lines of each source."""

    model_config = {"frozen": True}

    kind: Literal["lines"] = "lines"
    count: PositiveInt = DEFAULT_LINE_COUNT


class ByteMode(BaseModel):
    """Print the first ``count`` bytes of each source."""

    model_config = {"frozen": True}

    kind: Literal["bytes"] = "bytes"
    count: PositiveInt


Mode = Annotated[LineMode | ByteMode, Field(discriminator="kind")]


class HeadConfig(BaseModel):
    """Validated, immutable configuration built once from the command line.

    Attributes:
        files: Source identifiers in declaration order. ``-`` is stdin.
        mode: Active output mode.
    """

    model_config = {"frozen": True}

    files: tuple[str, ...] = Field(default=(STDIN_SENTINEL,), min_length=1)
    mode: Mode = Field(default_factory=LineMode)

    @property
    def line_count(self) -> int | None:
        return self.mode.count if isinstance(self.mode, LineMode) else None

    @property
    def byte_count(self) -> int | None:
        return self.mode.count if isinstance(self.mode, ByteMode) else None

    @property
    def multiple(self) -> bool:
        """True when headers must be printed."""
        return len(self.files) > 1

    @classmethod
    def build(
        cls,
        files: tuple[str, ...] | list[str] = (),
        *,
        lines: int | None = None,
        bytes_: int | None = None,
    ) -> HeadConfig:
        """Build a configuration from parsed CLI values.

        An empty *files* falls back to stdin. *bytes_* wins over the line
        default; passing both is a caller error.
        """
        if lines is not None and bytes_ is not None:
            msg = "lines and bytes are mutually exclusive"
            raise ValueError(msg)
        mode: LineMode | ByteMode
        if bytes_ is not None:
            mode = ByteMode(count=bytes_)
        else:
            mode = LineMode(count=lines if lines is not None else DEFAULT_LINE_COUNT)
        return cls(files=tuple(files) or (STDIN_SENTINEL,), mode=mode)
