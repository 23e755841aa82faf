"""Pydantic schemas for registration, login and tokens."""

from pydantic import BaseModel, Field, field_validator

# bcrypt only considers the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72

# Largest value an SQLite INTEGER column can hold
MAX_ROW_ID = 2**63 - 1


class UserBase(BaseModel):
    """Fields shared by user schemas."""

    username: str = Field(..., min_length=1, max_length=255, description="Unique login name")


class UserCreate(UserBase):
    """Registration request body."""

    password: str = Field(..., min_length=1, description="Plaintext password")
    fullname: str = Field(..., max_length=255, description="Display name")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserLogin(BaseModel):
    """Login request body."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User as exposed outside the storage layer (no password hash)."""

    id: int
    username: str
    fullname: str = ""
    created_at: str | None = None


class TokenPayload(BaseModel):
    """Decoded claims of an access token."""

    id: int = Field(..., ge=1, le=MAX_ROW_ID)
    username: str
    iat: int
    exp: int


class LoginResponse(BaseModel):
    message: str
    token: str


class MessageResponse(BaseModel):
    message: str
