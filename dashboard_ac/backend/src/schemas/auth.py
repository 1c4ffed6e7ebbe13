"""Authentication request and response schemas."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator

from ..models.user import Role
from .user import UserSummary, check_password_length


class RegisterRequest(BaseModel):
    """Self-service registration payload.

    ``phone`` and ``address`` are only required when the account is a
    customer; the account service enforces that rule.
    """

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6)
    role: Role | None = None
    phone: str | None = Field(default=None, min_length=10, max_length=15)
    address: str | None = Field(default=None, min_length=10, max_length=500)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_length(value)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RefreshTokenRequest(BaseModel):
    refresh_token: str = Field(min_length=1)


class TokenPairRead(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class LoginResult(BaseModel):
    user: UserSummary
    tokens: TokenPairRead


class RefreshResult(BaseModel):
    tokens: TokenPairRead


class ProfileRead(BaseModel):
    id: int
    email: EmailStr
    role: Role


__all__ = [
    "LoginRequest",
    "LoginResult",
    "ProfileRead",
    "RefreshResult",
    "RefreshTokenRequest",
    "RegisterRequest",
    "TokenPairRead",
]
