"""
Logging Package
Structured logging with header redaction

Provides drop-in replacement for standard logging that uses
structured JSON logging with sensitive data filtering.
"""
from sanicview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Loggers under the 'sanicview' namespace pick up the handlers installed by
    LoggerConfig.setup_logger('sanicview'); before that they propagate to the
    root logger.

    Example:
        from sanicview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Header queued: %s", line)
    """
    return logging.getLogger(name)
