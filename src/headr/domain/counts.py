"""Count validation for ``--lines`` and ``--bytes``.

A count is a base-10 unsigned integer strictly greater than zero. Leading
``+`` is tolerated; whitespace, underscores and signs other than ``+`` are not.

INVARIANT: a rejected count raises ``ValueError`` whose message is the raw
input, unchanged. Callers add the field-specific prefix.
"""

from __future__ import annotations

import re

_UNSIGNED = re.compile(r"\+?[0-9]+")

LINE_COUNT_ERROR = "illegal line count"
BYTE_COUNT_ERROR = "illegal byte count"


def parse_positive(value: str) -> int:
    """Return *value* as an int if it is a positive integer, else raise ``ValueError(value)``."""
    if _UNSIGNED.fullmatch(value) is None:
        raise ValueError(value)
    number = int(value)
    if number <= 0:
        raise ValueError(value)
    return number


def count_error(prefix: str, value: str) -> str:
    """Format a rejected count as ``"<prefix> -- <value>"``."""
    return f"{prefix} -- {value}"
