"""JWT token service.

Tokens are HS256-signed with settings.jwt_secret_key and carry:
- id: user id
- username: login name
- iat: issued-at (Unix seconds)
- exp: expiry (iat + settings.jwt_expiry_days)

Tokens are stateless. There is no revocation list; a token stays valid
for its whole window even if the account is deleted.
"""

import logging
from datetime import timedelta

import jwt
from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..exceptions import AuthInvalid, AuthMissing
from ..utils import isodatetime
from .schemas import TokenPayload, UserResponse

logger = logging.getLogger(__name__)


def generate_access_token(user: UserResponse) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user: User whose id and username become the token claims

    Returns:
        Encoded JWT string
    """
    now = isodatetime.now_unix()
    expiry = now + int(timedelta(days=settings.jwt_expiry_days).total_seconds())

    payload = {
        "id": user.id,
        "username": user.username,
        "iat": now,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def validate_access_token(token: str) -> TokenPayload:
    """
    Verify signature and expiry, then decode claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed, forged or
            missing required claims
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["exp", "iat"]},
    )

    try:
        return TokenPayload(**payload)
    except PydanticValidationError as e:
        raise jwt.InvalidTokenError(f"Token claims are incomplete: {e.error_count()} error(s)")


def verify_token(token: str | None) -> TokenPayload:
    """
    Verify a bearer token and map failures onto the auth error kinds.

    Raises:
        AuthMissing: If no token was supplied
        AuthInvalid: If the token is expired, forged or malformed
    """
    if not token:
        raise AuthMissing("Unauthorized", {"code": "missing_auth"})

    try:
        return validate_access_token(token)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthInvalid("Forbidden", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthInvalid("Forbidden", {"code": "invalid_token"})


# ============================================================================
# Introspection
# ============================================================================


def decode_token_no_validation(token: str) -> dict:
    """Decode claims without checking signature or expiry. Never trust the result."""
    return jwt.decode(token, options={"verify_signature": False, "verify_exp": False})


def get_token_expiry_remaining(token: str) -> timedelta | None:
    """Time left before a valid token expires, or None if invalid or expired."""
    try:
        payload = validate_access_token(token)
    except jwt.InvalidTokenError:
        return None

    remaining = payload.exp - isodatetime.now_unix()
    return timedelta(seconds=remaining) if remaining > 0 else None


def is_token_expired(token: str) -> bool:
    """True if the token is expired or otherwise unusable."""
    return get_token_expiry_remaining(token) is None
