"""
Common error handling utilities.

Maps facade results and service exceptions to HTTP responses in one place.
"""

import functools
import logging

from fastapi import HTTPException, status

from core.constants import SUFFIX_NOT_EXIST
from models.result import Result, Severity
from repository.base import RepositoryException
from services.exceptions import CatalogConsistencyError

logger = logging.getLogger(__name__)


def create_not_found_exception(resource_type: str, resource_id: int) -> HTTPException:
    """
    Create HTTP 404 exception for any resource not found.

    Args:
        resource_type: Type of resource (movie, season, ...)
        resource_id: ID of the resource that was not found

    Returns:
        HTTPException with 404 status code
    """
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{resource_type} doesn't exist: {resource_id}"
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


def is_not_found_result(result: Result) -> bool:
    """Whether every error of the result reports a missing entity."""
    errors = [event for event in result.events if event.severity == Severity.ERROR]
    return bool(errors) and all(event.key.endswith(SUFFIX_NOT_EXIST) for event in errors)


def raise_for_result(result: Result) -> Result:
    """
    Return successful result, raise HTTP exception for a failed one.

    Args:
        result: Result of a facade operation

    Returns:
        The same result when it holds no error

    Raises:
        HTTPException: 404 when only missing entities were reported,
            422 otherwise; detail carries every event
    """
    if result.is_ok:
        return result

    status_code = (
        status.HTTP_404_NOT_FOUND if is_not_found_result(result)
        else status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    raise HTTPException(
        status_code=status_code,
        detail=[event.model_dump(mode="json") for event in result.events],
    )


def handle_service_exceptions(operation: str):
    """
    Decorator turning service failures into HTTP 500 responses.

    Args:
        operation: Description of the operation being performed

    Returns:
        Decorator function
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (CatalogConsistencyError, RepositoryException) as service_error:
                logger.error(f"Failed to {operation}: {service_error}")
                raise create_internal_server_error_exception(operation, service_error)

        return wrapper
    return decorator
