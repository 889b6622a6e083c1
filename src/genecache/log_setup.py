"""Configure stdlib logging and structlog from a LogConfig."""

import logging
import sys
from typing import Optional, TextIO

import structlog

from genecache.config.schema import LogConfig

# Timestamp layout of the event log, e.g. 19/Oct/2026:14:03:59
TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S"

# Third party loggers that would otherwise log every request at info level
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(config: LogConfig) -> Optional[TextIO]:
    """
    Route structured events and plain log records to the configured output.

    structlog events and stdlib records share one handler and one renderer,
    so every line of the log has the configured format.

    Args:
        config: Logging configuration

    Returns:
        The opened log file when ``config.file`` is set, so the caller can
        close it; None when logging to stderr

    Raises:
        OSError: If the log file cannot be created
    """
    log_file: Optional[TextIO] = None
    if config.file is not None:
        log_file = open(config.file, "w", encoding="utf-8")
    stream = log_file if log_file is not None else sys.stderr

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT),
    ]

    if config.format == "text":
        final_processors = [structlog.dev.ConsoleRenderer(colors=False)]
    else:
        final_processors = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    handler = logging.StreamHandler(stream)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *final_processors,
        ],
    ))

    logging.basicConfig(
        level=config.numeric_level,
        handlers=[handler],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, config.numeric_level))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return log_file
