"""Authentication Pydantic schemas for API validation."""

from .auth import (
    MAX_PASSWORD_BYTES,
    MAX_ROW_ID,
    LoginResponse,
    MessageResponse,
    TokenPayload,
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
)

__all__ = [
    "MAX_PASSWORD_BYTES",
    "MAX_ROW_ID",
    "LoginResponse",
    "MessageResponse",
    "TokenPayload",
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
]
