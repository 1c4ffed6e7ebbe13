"""Application error taxonomy.

Every error is an :class:`~fastapi.HTTPException` so service functions can
raise them directly, the same way route handlers do. The exception handlers
in :mod:`dashboard_ac.backend.src.api.errors` render them through the
response envelope.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None, *, errors: Any = None) -> None:
        super().__init__(
            status_code=type(self).status_code,
            detail=detail or type(self).default_detail,
        )
        self.errors = errors


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"

    def __init__(self, detail: str | None = None, *, errors: Any = None) -> None:
        super().__init__(detail, errors=errors)
        self.headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Insufficient permissions"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(AppError):
    # Registration reports duplicates as a plain bad request.
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Resource already exists"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"


class DuplicateEmail(ConflictError):
    default_detail = "User with this email already exists"


class MissingCustomerFields(ValidationError):
    default_detail = "Phone and address are required for customer registration"


class InvalidCredentials(AuthenticationError):
    default_detail = "Invalid email or password"


class AccountDeactivated(AuthenticationError):
    default_detail = "User account is deactivated"


class InvalidToken(AuthenticationError):
    default_detail = "Invalid or expired token"


class InvalidTokenType(AuthenticationError):
    default_detail = "Invalid token type"


__all__ = [
    "AccountDeactivated",
    "AppError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DuplicateEmail",
    "InternalError",
    "InvalidCredentials",
    "InvalidToken",
    "InvalidTokenType",
    "MissingCustomerFields",
    "NotFoundError",
    "ValidationError",
]
