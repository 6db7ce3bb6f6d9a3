"""structlog configuration for headr.

Log events share stderr with the per-source diagnostics, so the ``headr``
logger stays at WARNING unless ``--debug`` is given; nothing headr logs
below that reaches the terminal by default. stdout is never touched.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from headr.config.settings import HeadrSettings


def configure_logging(settings: HeadrSettings, *, stream: TextIO | None = None) -> None:
    """Route headr's stdlib log records through structlog to *stream*.

    Args:
        settings: ``debug`` selects DEBUG for the ``headr`` logger,
            ``log_json`` selects JSON lines over console text.
        stream: Destination, stderr when omitted.
    """
    target = stream if stream is not None else sys.stderr
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # Open failures are logged with exc_info; JSON needs it as a string.
    renderer_chain: list[structlog.types.Processor]
    if settings.log_json:
        renderer_chain = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer_chain = [structlog.dev.ConsoleRenderer(colors=target.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderer_chain,
        ],
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("headr").setLevel(logging.DEBUG if settings.debug else logging.WARNING)
