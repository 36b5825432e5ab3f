from abc import ABC, abstractmethod
from typing import Any, Dict


class InvalidTokenError(Exception):
    """Token is malformed, expired, or signed with another secret."""


class TokenService(ABC):
    """
    Issues and verifies access and refresh tokens.

    Access tokens carry ``user_id`` and ``email``; refresh tokens carry only
    ``user_id``. The two kinds are signed with different secrets and are not
    interchangeable.
    """

    @abstractmethod
    def generate_access_token(self, user_id: int, email: str) -> str:
        pass

    @abstractmethod
    def generate_refresh_token(self, user_id: int) -> str:
        pass

    @abstractmethod
    def verify_access_token(self, token: str) -> Dict[str, Any]:
        """Return the payload or raise InvalidTokenError"""
        pass

    @abstractmethod
    def verify_refresh_token(self, token: str) -> Dict[str, Any]:
        """Return the payload or raise InvalidTokenError"""
        pass
