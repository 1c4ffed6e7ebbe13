"""Request authentication and role enforcement dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import structlog
from fastapi import Depends, Header

from ..models.user import Role
from .config import get_settings
from .errors import AuthenticationError, AuthorizationError, InvalidTokenType
from .tokens import TokenCodec, extract_bearer_token

LOGGER = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Identity attached to an authenticated request."""

    account_id: int
    email: str
    role: Role


# -------------------------------------------------------
# Token codec
# -------------------------------------------------------

@lru_cache()
def get_token_codec() -> TokenCodec:
    """Return the process-wide codec built from settings."""

    settings = get_settings()
    return TokenCodec(
        secret=settings.jwt_secret,
        access_ttl=settings.access_token_ttl,
        refresh_ttl=settings.refresh_token_ttl,
        algorithm=settings.jwt_algorithm,
    )


# -------------------------------------------------------
# Authentication
# -------------------------------------------------------

def authenticate(authorization: str | None, codec: TokenCodec) -> RequestContext:
    """Resolve a request context from a raw ``Authorization`` header value."""

    if not authorization:
        raise AuthenticationError("Authorization header is required")

    token = extract_bearer_token(authorization)
    claims = codec.validate(token)
    if not claims.is_access:
        LOGGER.info("bearer_rejected", reason="token_type", account_id=claims.account_id)
        raise InvalidTokenType()

    return RequestContext(
        account_id=claims.account_id,
        email=claims.email,
        role=claims.role,
    )


def get_request_context(
    authorization: str | None = Header(default=None),
    codec: TokenCodec = Depends(get_token_codec),
) -> RequestContext:
    """Dependency resolving the caller from the bearer access token."""

    return authenticate(authorization, codec)


# -------------------------------------------------------
# Role enforcement
# -------------------------------------------------------

def enforce_roles(context: RequestContext, allowed_roles: frozenset[Role]) -> RequestContext:
    """Ensure the authenticated caller holds one of ``allowed_roles``."""

    if context.role in allowed_roles:
        return context
    LOGGER.info(
        "role_rejected",
        account_id=context.account_id,
        role=context.role.value,
        allowed=sorted(role.value for role in allowed_roles),
    )
    raise AuthorizationError("Insufficient permissions")


def require_role(*roles: Role | str):
    """Return a dependency that admits only callers holding one of ``roles``."""

    if not roles:
        raise ValueError("require_role needs at least one role")
    allowed = frozenset(Role(role) for role in roles)

    def dependency(context: RequestContext = Depends(get_request_context)) -> RequestContext:
        return enforce_roles(context, allowed)

    return dependency


require_admin = require_role(Role.ADMIN)
require_admin_or_technician = require_role(Role.ADMIN, Role.TECHNICIAN)
require_any_role = require_role(*Role)


__all__ = [
    "RequestContext",
    "authenticate",
    "enforce_roles",
    "get_request_context",
    "get_token_codec",
    "require_admin",
    "require_admin_or_technician",
    "require_any_role",
    "require_role",
]
