from datetime import timedelta

import pytest
from jose import jwt

from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.token_service import JwtTokenService
from src.app.services.token_service import InvalidTokenError


def test_bcrypt_hash_and_compare():
    hasher = BcryptPasswordHasher(rounds=4)

    hashed = hasher.hash("Password123!")

    assert hashed != "Password123!"
    assert hashed.startswith("$2")
    assert hasher.compare("Password123!", hashed)
    assert not hasher.compare("Password124!", hashed)


def test_bcrypt_compare_with_non_hash_is_false():
    assert not BcryptPasswordHasher(rounds=4).compare("Password123!", "plain-text")


def test_access_token_payload():
    service = JwtTokenService(access_secret="a", refresh_secret="r")

    payload = service.verify_access_token(service.generate_access_token(7, "ada@example.com"))

    assert payload["userId"] == 7
    assert payload["email"] == "ada@example.com"
    assert payload["type"] == "access"
    assert payload["exp"] - payload["iat"] == 15 * 60


def test_refresh_token_is_not_an_access_token():
    service = JwtTokenService(access_secret="a", refresh_secret="r")
    refresh_token = service.generate_refresh_token(7)

    assert service.verify_refresh_token(refresh_token)["userId"] == 7
    with pytest.raises(InvalidTokenError):
        service.verify_access_token(refresh_token)


def test_expired_token_is_rejected():
    service = JwtTokenService(
        access_secret="a", refresh_secret="r", access_expires=timedelta(seconds=-1)
    )

    with pytest.raises(InvalidTokenError):
        service.verify_access_token(service.generate_access_token(7, "ada@example.com"))


def test_token_with_wrong_claims_is_rejected():
    service = JwtTokenService(access_secret="a", refresh_secret="r")
    token = jwt.encode({"userId": "7", "type": "access"}, "a", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        service.verify_access_token(token)
