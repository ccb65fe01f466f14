# compareoffers/core/logging_config.py
import logging
import sys
from typing import Optional, TextIO

import structlog


def setup_logging(
    level: str = "WARNING",
    json: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog + standaard logging.
    CLI logt naar stderr zodat stdout alleen de tabel bevat.
    """
    log_level = logging.getLevelName(str(level).upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=log_level,
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Globale logger die je overal kunt importeren
logger = structlog.get_logger("compareoffers")
