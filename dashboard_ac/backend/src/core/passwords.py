"""Password hashing helpers."""

from __future__ import annotations

from functools import lru_cache

import structlog
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from .config import get_settings
from .errors import InternalError, ValidationError

LOGGER = structlog.get_logger(__name__)

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


@lru_cache()
def _get_context() -> CryptContext:
    """Return the bcrypt context configured with the current cost factor.

    Over-long passwords raise instead of being truncated, so no two distinct
    passwords can share a digest.
    """

    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
        bcrypt__truncate_error=True,
    )


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(plaintext: str) -> str:
    """Return a salted bcrypt digest of ``plaintext``."""

    if password_too_long(plaintext):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    try:
        return _get_context().hash(plaintext)
    except PasswordSizeError as exc:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes") from exc
    except (ValueError, TypeError) as exc:
        LOGGER.error("password_hash_failed", error_type=type(exc).__name__)
        raise InternalError("Unable to hash password") from exc


def verify_password(digest: str, plaintext: str) -> bool:
    """Return ``True`` when ``plaintext`` matches ``digest``."""

    if not digest or password_too_long(plaintext):
        return False
    try:
        return _get_context().verify(plaintext, digest)
    except (ValueError, TypeError):
        LOGGER.warning("password_digest_unreadable")
        return False


__all__ = ["MAX_PASSWORD_BYTES", "hash_password", "password_too_long", "verify_password"]
