"""Utilities for seeding initial data."""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.config import Settings, get_settings
from ..core.passwords import hash_password
from ..models import Role, User

LOGGER = structlog.get_logger(__name__)


@dataclass
class SeedResult:
    """Information about the seeded administrator."""

    user: User
    user_created: bool


def seed_initial_admin(session: Session, settings: Settings | None = None) -> SeedResult:
    """Ensure the bootstrap administrator account exists.

    The caller owns the transaction. Existing accounts are left untouched.
    """

    settings = settings or get_settings()
    user = session.scalars(
        select(User).where(User.email == settings.seed_admin_email)
    ).one_or_none()
    if user is not None:
        LOGGER.info("seed_admin_exists", user_id=user.id)
        return SeedResult(user=user, user_created=False)

    user = User(
        name=settings.seed_admin_name,
        email=settings.seed_admin_email,
        password_hash=hash_password(settings.seed_admin_password),
        role=Role.ADMIN,
        is_active=True,
    )
    session.add(user)
    session.flush()
    LOGGER.info("seed_admin_created", user_id=user.id, email=user.email)
    return SeedResult(user=user, user_created=True)


__all__ = ["SeedResult", "seed_initial_admin"]
