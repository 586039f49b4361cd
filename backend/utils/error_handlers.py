"""
Error handling decorators and utilities for API endpoints.

Services report expected failures through the response envelope, so these
handlers only see exceptions: validation problems raised while building a
request, envelopes unwrapped by a caller, and storage failures.
"""

import inspect
from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from constants import HTTPStatus
from exceptions import (
    ConfigurationError,
    ValidationError,
    NotFoundError,
    DatabaseError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """Translate an exception raised inside an endpoint into an HTTPException."""
    if isinstance(error, (ConfigurationError, ValidationError)):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, NotFoundError):
        logger.info(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Application exceptions become HTTPException responses with consistent
    status codes and messages. HTTPException passes through unchanged.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create customer")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("")
        @handle_api_errors("Create customer")
        def create_customer(...):
            return to_http_response(service.add_customer(body))
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
