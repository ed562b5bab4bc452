"""Structured logging for Kalkulator Pratt.

All loggers live under the ``kalkulator_pratt`` namespace, so one call to
``setup_logging`` configures the lexer, evaluator, formatting and CLI loggers
together.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

LOGGER_NAMESPACE = "kalkulator_pratt"


class StructuredFormatter(logging.Formatter):
    """One line per record: timestamp, level, component and message.

    The component is the logger name without the package prefix, e.g.
    ``evaluator`` rather than ``kalkulator_pratt.evaluator``.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        component = record.name.removeprefix(f"{LOGGER_NAMESPACE}.")
        message = f"{timestamp} [{record.levelname}] {component}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to WARNING
        log_file: Optional file that receives the same records as stderr

    Returns:
        The ``kalkulator_pratt`` logger
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # calling twice (tests, repeated main_entry) must not duplicate output
    logger.handlers.clear()
    logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    """Logger for one component, e.g. ``get_logger("lexer")``."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{component}")
