"""Structured JSON Logging Configuration.

Implements structured logging with operation_id tracking, so every log entry
written while loading or saving the data file can be correlated.
All logs are output in JSON format for easy parsing.
"""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger import jsonlogger

from ..utils import generate_operation_id
from .config import settings
from .constants import Logging

operation_id_var: ContextVar[str] = ContextVar('operation_id', default=Logging.DEFAULT_OPERATION_ID)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that includes operation_id and standard fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['operation_id'] = operation_id_var.get()

        log_record['file'] = record.filename
        log_record['line'] = record.lineno
        log_record['function'] = record.funcName


def setup_logging():
    """Setup structured JSON logging for the application."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, settings.LOG_LEVEL))
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, settings.LOG_LEVEL))

    formatter = CustomJsonFormatter(
        '%(timestamp)s %(level)s %(name)s %(message)s',
        timestamp=True
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    logger.info(
        "Logging configured",
        extra={
            'log_level': settings.LOG_LEVEL,
            'environment': settings.ENVIRONMENT
        }
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def set_operation_id(operation_id: str | None = None, prefix: str | None = None):
    """Set the operation ID for the current context.

    Args:
        operation_id: Operation ID to set (generates one if not provided)
        prefix: Prefix used when an ID is generated
    """
    if operation_id is None:
        operation_id = generate_operation_id(prefix)
    operation_id_var.set(operation_id)
    return operation_id


def get_operation_id() -> str:
    """Get the current operation ID.

    Returns:
        Current operation ID
    """
    return operation_id_var.get()
