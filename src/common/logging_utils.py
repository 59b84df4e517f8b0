"""Logging utilities shared by the term-mouse command line tools.

Modules log through ``logging.getLogger(__name__)``; this module only
configures where the ``term_mouse`` records end up.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


class ISOFormatter(logging.Formatter):
    """Log formatter with ISO timestamp including milliseconds.

    Formats log messages as:
        <ISO-datetime-with-ms> <log-level> [<logger-name>:<lineno>]: <message>

    Exception tracebacks, when present, follow on the next lines.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created).isoformat(timespec='milliseconds')

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with ISO timestamp."""
        line = f'{self.formatTime(record)} {record.levelname} [{record.name}:{record.lineno}]: {record.getMessage()}'
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging_handler(
    logger: logging.Logger,
    log_level: str = 'WARNING',
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a single handler to the logger.

    Args:
        logger: Logger instance to configure
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Log to this file instead of the console
        stream: Console stream, defaults to sys.stderr

    Returns:
        logging.Handler: The installed handler

    Raises:
        ValueError: If log_level is not a known level
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f'Invalid log_level: {log_level}')  # noqa: TRY003
    level = getattr(logging, level_name)

    logger.setLevel(level)
    logger.handlers.clear()

    handler: logging.Handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(ISOFormatter())
    logger.addHandler(handler)
    return handler
