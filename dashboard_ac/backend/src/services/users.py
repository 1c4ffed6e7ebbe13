"""Service layer functions for administrative user management."""

from __future__ import annotations

import structlog
from sqlalchemy.orm import Session

from ..core.errors import DuplicateEmail, ValidationError
from ..core.passwords import hash_password
from ..db import transaction
from ..models import Role, User
from ..schemas.common import PageParams
from ..schemas.user import UserCreate, UserUpdate
from .queries import active, ensure_unique, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)

EMAIL_TAKEN = "Email is already taken"


def get_user(session: Session, user_id: int) -> User:
    return get_or_404(session, User, user_id, "User")


def list_users(session: Session, params: PageParams) -> tuple[list[User], int]:
    """Return users ordered by creation time descending."""

    return paginate(session, active(User).order_by(User.created_at.desc()), params)


def list_users_by_role(
    session: Session, role: Role, params: PageParams
) -> tuple[list[User], int]:
    stmt = active(User).where(User.role == role).order_by(User.created_at.desc())
    return paginate(session, stmt, params)


def create_user(session: Session, payload: UserCreate) -> User:
    """Create an account directly, bypassing self-service registration."""

    ensure_unique(session, User.email, payload.email, EMAIL_TAKEN, error=DuplicateEmail)
    password_hash = hash_password(payload.password)
    with transaction(session):
        user = User(
            name=payload.name,
            email=payload.email,
            password_hash=password_hash,
            role=payload.role,
            is_active=True,
        )
        session.add(user)
        session.flush()

    LOGGER.info("user_created", user_id=user.id, role=user.role.value)
    return user


def update_user(session: Session, user_id: int, payload: UserUpdate) -> User:
    """Apply the provided fields to a user."""

    with transaction(session):
        user = get_user(session, user_id)
        changes = payload.model_dump(exclude_none=True)
        if "email" in changes:
            ensure_unique(
                session,
                User.email,
                changes["email"],
                EMAIL_TAKEN,
                exclude_id=user.id,
                error=DuplicateEmail,
            )
        for field, value in changes.items():
            setattr(user, field, value)
        session.flush()
    return user


def update_user_role(session: Session, user_id: int, role: str) -> User:
    """Update a user's role after validating the value."""

    try:
        normalized_role = Role((role or "").strip().lower())
    except ValueError as exc:
        raise ValidationError("Invalid role") from exc

    with transaction(session):
        user = get_user(session, user_id)
        user.role = normalized_role
        session.flush()
    return user


def deactivate_user(session: Session, user_id: int) -> User:
    """Deactivate a user account without deleting it."""

    with transaction(session):
        user = get_user(session, user_id)
        user.is_active = False
        session.flush()
    return user


def delete_user(session: Session, user_id: int) -> None:
    """Soft-delete a user account."""

    with transaction(session):
        get_user(session, user_id).soft_delete()
    LOGGER.info("user_deleted", user_id=user_id)


__all__ = [
    "create_user",
    "deactivate_user",
    "delete_user",
    "get_user",
    "list_users",
    "list_users_by_role",
    "update_user",
    "update_user_role",
]
