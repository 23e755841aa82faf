"""Credential hashing and account management.

Passwords are hashed with bcrypt; the work factor comes from
settings.bcrypt_work_factor and is encoded in the hash itself, so hashes
made with an older factor still verify after the setting changes.

Account functions take a Core storage handle and never commit; the caller
owns the transaction boundary.
"""

import logging

import bcrypt

from ..config import settings
from ..db import Core
from ..exceptions import CredentialHashError, IncorrectPassword, UserNotFound
from . import token
from .schemas import MAX_PASSWORD_BYTES, UserCreate, UserResponse

logger = logging.getLogger(__name__)


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh salt.

    Returns:
        60-character bcrypt hash string ($2b$<cost>$<salt+digest>)

    Raises:
        CredentialHashError: If the password is too long or bcrypt rejects it
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        raise CredentialHashError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    try:
        salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
        hashed = bcrypt.hashpw(password_bytes, salt)
    except ValueError as e:
        logger.error(f"Password hashing failed: {e}")
        raise CredentialHashError("Failed to hash password")
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Comparison is constant-time inside bcrypt. A malformed stored hash
    counts as a mismatch, as does a password longer than bcrypt reads,
    since older bcrypt releases would compare only its first 72 bytes.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        return False

    try:
        return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Password verification rejected its input")
        return False


# ============================================================================
# User Lookup
# ============================================================================


def _row_to_user(row) -> UserResponse:
    return UserResponse(
        id=row["id"],
        username=row["username"],
        fullname=row["fullname"],
        created_at=row["created_at"],
    )


def get_user_by_id(core: Core, user_id: int) -> UserResponse | None:
    row = core.user.get_by_id(user_id)
    return _row_to_user(row) if row else None


def get_user_by_username(core: Core, username: str) -> UserResponse | None:
    row = core.user.get_by_username(username)
    return _row_to_user(row) if row else None


# ============================================================================
# Account Manager
# ============================================================================


def register(core: Core, data: UserCreate) -> UserResponse:
    """
    Create a user account.

    Hashes the password and inserts in one statement. The storage layer's
    unique constraint decides duplicates, so two concurrent registrations
    for the same username cannot both succeed.

    Raises:
        DuplicateUsername: If the username is taken
        CredentialHashError: If hashing fails
    """
    password_hash = hash_password(data.password)
    user_id = core.user.create(data.username, password_hash, data.fullname)
    return UserResponse(id=user_id, username=data.username, fullname=data.fullname)


def login(core: Core, username: str, password: str) -> tuple[UserResponse, str]:
    """
    Verify credentials and issue an access token.

    Returns:
        Tuple of (user, token)

    Raises:
        UserNotFound: If no user has this username
        IncorrectPassword: If the password does not match
    """
    row = core.user.get_with_password(username)
    if row is None:
        raise UserNotFound("User not found", {"username": username})

    if not verify_password(password, row["password_hash"]):
        raise IncorrectPassword("Incorrect password", {"username": username})

    user = _row_to_user(row)
    return user, token.generate_access_token(user)


def delete_account(core: Core, user_id: int) -> bool:
    """
    Delete a user and their notes.

    Tokens already issued to the user stay valid until they expire.

    Returns:
        True if the user existed
    """
    return core.user.delete(user_id)
