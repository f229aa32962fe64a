"""structlog configuration for the ``city-grid`` command.

Events are rendered by structlog itself (console or JSON) and handed to the
stdlib ``city_grid`` logger as finished lines, so level filtering stays with
stdlib logging and output goes to stderr.

Library modules only call ``structlog.get_logger(__name__)``; configuring
output is left to the application.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send structlog events to stderr.

    Args:
        verbose: Enable DEBUG output for ``city_grid``; otherwise WARNING+.
        log_json: One JSON object per line instead of console output.
    """
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("city_grid").setLevel(logging.DEBUG if verbose else logging.WARNING)
