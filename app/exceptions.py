"""Application error taxonomy and its mapping to HTTP status codes"""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class AppException(HTTPException):
    """Base class for errors rendered as ``{"error": detail}``"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


class ValidationError(AppException):
    """Raised when required input is missing or violates a record constraint"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppException):
    """Raised when a referenced record does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppException):
    """Raised when a uniqueness constraint is violated"""
    status_code = status.HTTP_400_BAD_REQUEST


class InfrastructureError(AppException):
    """Raised when the store is unreachable or an unexpected fault occurs"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def endpoint_errors(message: str) -> Iterator[None]:
    """
    Map anything that is not a client error to a 500 with the endpoint's message.

    Validation, not-found and conflict errors pass through unchanged.
    Everything else is logged with its traceback and replaced by
    ``InfrastructureError(message)`` so no internals reach the client.
    """
    try:
        yield
    except (ValidationError, NotFoundError, ConflictError):
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise InfrastructureError(message) from e
