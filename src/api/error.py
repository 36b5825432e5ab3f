from typing import Dict

from fastapi import status

from src.app import errors
from src.libs.result import Error

# Use case error code -> HTTP status for client errors
CLIENT_ERROR_STATUS: Dict[str, int] = {
    errors.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    errors.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    errors.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    errors.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    errors.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.CONFLICT: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> None:
    """Raise the ClientError or ServerError matching a use case error code."""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
