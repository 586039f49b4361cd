"""
Logging Utilities

Root logger setup plus helpers for adding structured context to log
messages emitted by the service layer.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from constants import LoggingConfig


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments copied into the context of @log_operation records
_TRACKED_KWARGS = ("customer_id", "product_id", "email", "product_type")


def configure_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> Optional[Path]:
    """
    Configure the root logger with a console handler and, when a directory
    is given, a rotating file handler (10MB per file, keep 5 backups).

    Safe to call more than once; handlers are only installed the first time.

    Args:
        log_dir: Directory for backend.log, or None for console only
        level: Root log level name

    Returns:
        Path of the log file, or None when logging to console only
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if getattr(root_logger, "_storefront_configured", False):
        return getattr(root_logger, "_storefront_log_file", None)

    log_formatter = logging.Formatter(LoggingConfig.FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LoggingConfig.FILE_NAME
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LoggingConfig.MAX_BYTES,
            backupCount=LoggingConfig.BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)

    root_logger._storefront_configured = True
    root_logger._storefront_log_file = log_file
    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Customer created", extra={
            "customer_id": customer.id,
            "operation": "add_customer",
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all structured log
    records within the current context (typically a request).

    Example:
        set_logging_context(request_id="abc-123", route="/api/customers")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _operation_context(operation_name: str, func, args, kwargs) -> Dict[str, Any]:
    """Collect tracked identifiers from keyword or positional arguments."""
    context: Dict[str, Any] = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs).arguments
    except TypeError:
        bound = kwargs
    for key in _TRACKED_KWARGS:
        if key in bound:
            value = bound[key]
            context[key] = value.value if hasattr(value, "value") else value
    return context


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end/failure with structured context.

    Works on sync and async callables.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("delete_customer")
        def delete_customer(self, customer_id: int):
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            context = _operation_context(operation_name, func, args, kwargs)
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            context = _operation_context(operation_name, func, args, kwargs)
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
