"""Issuing and validating signed access/refresh token pairs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

import structlog
from jose import JWTError, jwt

from ..models.user import Role
from .errors import AuthenticationError, InvalidToken

LOGGER = structlog.get_logger(__name__)

ACCESS_SUBJECT = "access"
REFRESH_SUBJECT = "refresh"
BEARER_PREFIX = "Bearer "


class TokenIdentity(Protocol):
    """Anything carrying the identity fields embedded in a token."""

    id: int
    email: str
    role: Role


@dataclass(frozen=True)
class TokenClaims:
    """Decoded payload of a verified token."""

    account_id: int
    email: str
    role: Role
    subject: str
    issued_at: datetime
    expires_at: datetime

    @property
    def is_access(self) -> bool:
        return self.subject == ACCESS_SUBJECT

    @property
    def is_refresh(self) -> bool:
        return self.subject == REFRESH_SUBJECT


@dataclass(frozen=True)
class TokenPair:
    """An access token paired with the refresh token that can renew it."""

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "bearer"

    def as_dict(self) -> dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
        }


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


@dataclass(frozen=True)
class TokenCodec:
    """HMAC-signed JWT codec bound to a single server secret.

    ``validate`` checks the signature and the expiry only; callers decide
    whether an access or a refresh token is acceptable by inspecting
    :attr:`TokenClaims.subject`.
    """

    secret: str
    access_ttl: timedelta = timedelta(minutes=15)
    refresh_ttl: timedelta = timedelta(days=7)
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("Token signing secret must not be empty")

    def _encode(
        self, identity: TokenIdentity, subject: str, issued_at: datetime, ttl: timedelta
    ) -> str:
        claims = {
            "user_id": identity.id,
            "email": identity.email,
            "role": Role(identity.role).value,
            "sub": subject,
            "iat": _timestamp(issued_at),
            "exp": _timestamp(issued_at + ttl),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def issue(self, identity: TokenIdentity, *, now: datetime | None = None) -> TokenPair:
        """Return a fresh access/refresh pair for ``identity``."""

        issued_at = now or _utcnow()
        return TokenPair(
            access_token=self._encode(identity, ACCESS_SUBJECT, issued_at, self.access_ttl),
            refresh_token=self._encode(
                identity, REFRESH_SUBJECT, issued_at, self.refresh_ttl
            ),
            expires_in=int(self.access_ttl.total_seconds()),
        )

    def validate(self, token: str, *, now: datetime | None = None) -> TokenClaims:
        """Verify ``token`` and return its claims.

        Malformed tokens, signature mismatches and expired tokens all raise
        the same :class:`InvalidToken` error.
        """

        if not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            LOGGER.info("token_rejected", reason="undecodable")
            raise InvalidToken() from exc

        try:
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
            claims = TokenClaims(
                account_id=int(payload["user_id"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
                subject=str(payload["sub"]),
                issued_at=issued_at,
                expires_at=expires_at,
            )
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.info("token_rejected", reason="claims")
            raise InvalidToken() from exc

        current = now or _utcnow()
        if _timestamp(current) >= _timestamp(claims.expires_at):
            LOGGER.info("token_rejected", reason="expired", subject=claims.subject)
            raise InvalidToken()
        return claims


def extract_bearer_token(header_value: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` value."""

    if not header_value or not header_value.startswith(BEARER_PREFIX):
        raise AuthenticationError("Invalid authorization header format")
    token = header_value[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Invalid authorization header format")
    return token


__all__ = [
    "ACCESS_SUBJECT",
    "REFRESH_SUBJECT",
    "TokenClaims",
    "TokenCodec",
    "TokenPair",
    "extract_bearer_token",
]
