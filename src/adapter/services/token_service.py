from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from src.app.services.token_service import InvalidTokenError, TokenService

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JwtTokenService(TokenService):
    """
    JWT implementation of TokenService (python-jose).

    Access token payload: userId, email, type=access (default 15 minutes).
    Refresh token payload: userId, type=refresh (default 7 days).
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expires: timedelta = timedelta(minutes=15),
        refresh_expires: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ):
        self.access_secret = access_secret
        self.refresh_secret = refresh_secret
        self.access_expires = access_expires
        self.refresh_expires = refresh_expires
        self.algorithm = algorithm

    def _encode(self, claims: Dict[str, Any], secret: str, expires: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + expires}
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def _decode(self, token: str, secret: str, token_type: str) -> Dict[str, Any]:
        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc
        if payload.get("type") != token_type or not isinstance(payload.get("userId"), int):
            raise InvalidTokenError("Unexpected token payload")
        return payload

    def generate_access_token(self, user_id: int, email: str) -> str:
        return self._encode(
            {"userId": user_id, "email": email, "type": ACCESS_TOKEN_TYPE},
            self.access_secret,
            self.access_expires,
        )

    def generate_refresh_token(self, user_id: int) -> str:
        return self._encode(
            {"userId": user_id, "type": REFRESH_TOKEN_TYPE},
            self.refresh_secret,
            self.refresh_expires,
        )

    def verify_access_token(self, token: str) -> Dict[str, Any]:
        return self._decode(token, self.access_secret, ACCESS_TOKEN_TYPE)

    def verify_refresh_token(self, token: str) -> Dict[str, Any]:
        return self._decode(token, self.refresh_secret, REFRESH_TOKEN_TYPE)
