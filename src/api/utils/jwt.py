from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from src.domain.entities import Identity

REQUIRED_CLAIMS = ("user_id", "email", "role")


class InvalidTokenError(Exception):
    """Token is malformed, has a bad signature, misses claims or is expired"""


class TokenSigningError(Exception):
    """Signing key is not configured"""


def _signing_key() -> str:
    secret = ApplicationConfig.JWT_SECRET
    if not secret:
        raise TokenSigningError("JWT signing key is not configured")
    return secret


def generate_jwt(identity: Identity, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate JWT access token

    Args:
        identity: Claims to embed (user_id, email, role)
        expires_delta: Token lifetime, defaults to JWT_EXPIRY_HOURS

    Returns:
        JWT token string (HS256)

    Raises:
        TokenSigningError: signing key is empty
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=ApplicationConfig.JWT_EXPIRY_HOURS)
    now = datetime.now(UTC)
    payload = {
        "user_id": identity.user_id,
        "email": identity.email,
        "role": identity.role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, _signing_key(), algorithm=ApplicationConfig.JWT_ALGORITHM)


def verify_jwt(token: str) -> Identity:
    """
    Verify and decode JWT token

    Validity is signature + expiry only; there is no revocation list.

    Raises:
        InvalidTokenError: token cannot be trusted
    """
    try:
        payload = jwt.decode(
            token, _signing_key(), algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
    except (JWTError, TokenSigningError) as exc:
        raise InvalidTokenError(str(exc)) from exc

    if any(not payload.get(claim) for claim in REQUIRED_CLAIMS):
        raise InvalidTokenError("Token is missing required claims")

    return Identity(
        user_id=str(payload["user_id"]),
        email=str(payload["email"]),
        role=str(payload["role"]),
    )
