"""
Common error handling utilities following Clean Code principles.

Provides reusable error handling functions to avoid code duplication (DRY principle).
Each function has a single responsibility and meaningful names.
"""

import functools
import logging

from fastapi import HTTPException, status
from repository.base import NotFoundError
from core.constants import ERROR_NOTE_NOT_FOUND

logger = logging.getLogger(__name__)


def create_not_found_exception(resource_type: str, resource_id: str) -> HTTPException:
    """
    Create HTTP 404 exception for any resource not found.

    Args:
        resource_type: Type of resource (note)
        resource_id: ID of the resource that was not found

    Returns:
        HTTPException with 404 status code
    """
    error_messages = {
        "note": ERROR_NOTE_NOT_FOUND,
    }

    error_message = error_messages.get(resource_type, f"{resource_type.title()} not found")

    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{error_message}: {resource_id}"
    )


def create_internal_server_error_exception(operation: str, error: Exception) -> HTTPException:
    """
    Create HTTP 500 exception for unexpected internal errors.

    Args:
        operation: Description of the operation that failed
        error: The unexpected error that occurred

    Returns:
        HTTPException with 500 status code
    """
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {operation}: {str(error)}"
    )


def create_validation_error_exception(field_name: str, validation_message: str) -> HTTPException:
    """
    Create HTTP 400 exception for validation errors.

    Args:
        field_name: Name of the field that failed validation
        validation_message: Description of the validation failure

    Returns:
        HTTPException with 400 status code
    """
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Validation error for {field_name}: {validation_message}"
    )


def handle_service_exceptions(operation: str, resource_type: str = "resource"):
    """
    Decorator to handle common service exceptions with clean error responses.

    HTTPExceptions raised by the endpoint itself pass through untouched.

    Args:
        operation: Description of the operation being performed
        resource_type: Type of resource for not found errors

    Returns:
        Decorator function
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except NotFoundError as not_found_error:
                raise create_not_found_exception(resource_type, not_found_error.entity_id)
            except ValueError as validation_error:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=str(validation_error)
                )
            except Exception as unexpected_error:
                logger.error(f"Failed to {operation}: {unexpected_error}")
                raise create_internal_server_error_exception(operation, unexpected_error)

        return wrapper
    return decorator


def validate_non_negative_integer(value: int, field_name: str) -> None:
    """
    Validate that a value is a non-negative integer.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Raises:
        HTTPException: If value is negative
    """
    if value < 0:
        raise create_validation_error_exception(
            field_name,
            "must be non-negative"
        )
