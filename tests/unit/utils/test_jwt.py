from datetime import timedelta

import pytest
from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import InvalidTokenError, TokenSigningError, generate_jwt, verify_jwt
from src.domain.entities import Identity


def member():
    return Identity(user_id="u1", email="member@acme.com", role="member")


def test_round_trip_keeps_claims():
    identity = verify_jwt(generate_jwt(member()))

    assert identity == member()


def test_expired_token_is_rejected():
    token = generate_jwt(member(), expires_delta=timedelta(seconds=-1))

    with pytest.raises(InvalidTokenError):
        verify_jwt(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode(
        {"user_id": "u1", "email": "x@acme.com", "role": "admin"},
        "someone-elses-key",
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        verify_jwt(token)


def test_malformed_token_is_rejected():
    with pytest.raises(InvalidTokenError):
        verify_jwt("not-a-jwt")


def test_token_missing_role_is_rejected():
    token = jwt.encode(
        {"user_id": "u1", "email": "x@acme.com"},
        ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        verify_jwt(token)


def test_signing_requires_key(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "JWT_SECRET", "")

    with pytest.raises(TokenSigningError):
        generate_jwt(member())
