"""
Core module for the Closet Log backend.
Contains exception handling and shared utilities.
"""
from .exceptions import (
    ClosetException,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    DatabaseError,
    ErrorResponse,
    register_exception_handlers,
)

__all__ = [
    "ClosetException",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "DatabaseError",
    "ErrorResponse",
    "register_exception_handlers",
]
