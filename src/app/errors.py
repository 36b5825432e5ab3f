"""
Application error codes.

Every failed use case returns one of these codes inside a
``src.libs.result.Error``; the API layer maps them to HTTP statuses.
"""

from src.domain.exceptions import ValidationError
from src.libs.result import Error

VALIDATION_ERROR = "VALIDATION_ERROR"
BAD_REQUEST = "BAD_REQUEST"
UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def validation_error(exc: ValidationError) -> Error:
    details = {"field": exc.field} if exc.field else None
    return Error(VALIDATION_ERROR, exc.message, details=details)


def not_found(entity: str) -> Error:
    return Error(NOT_FOUND, f"{entity} not found")
