"""Administrative endpoints for managing user accounts."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..core.security import RequestContext, require_admin
from ..db import get_session_dependency
from ..models import Role
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.user import UserCreate, UserRead, UserUpdate
from ..services import users as user_service

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_admin)])

LOGGER = structlog.get_logger(__name__)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


class RoleUpdate(BaseModel):
    """Payload for updating a user's role."""

    role: str


@router.get("", response_model=PaginatedEnvelope[UserRead])
def list_users(session: SessionDep, params: PageDep) -> dict[str, object]:
    """Return all users in the system."""

    items, total = user_service.list_users(session, params)
    return paginated("Users retrieved successfully", items, total, params)


@router.get("/role/{role}", response_model=PaginatedEnvelope[UserRead])
def list_users_by_role(role: Role, session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = user_service.list_users_by_role(session, role, params)
    return paginated("Users retrieved successfully", items, total, params)


@router.get("/{user_id}", response_model=Envelope[UserRead])
def get_user(user_id: int, session: SessionDep) -> dict[str, object]:
    return envelope("User retrieved successfully", user_service.get_user(session, user_id))


@router.post("", response_model=Envelope[UserRead], status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    session: SessionDep,
    admin: Annotated[RequestContext, Depends(require_admin)],
) -> dict[str, object]:
    """Create an account on behalf of an administrator."""

    user = user_service.create_user(session, payload)
    LOGGER.info("admin_created_user", admin_id=admin.account_id, user_id=user.id)
    return envelope("User created successfully", user)


@router.put("/{user_id}", response_model=Envelope[UserRead])
def update_user(user_id: int, payload: UserUpdate, session: SessionDep) -> dict[str, object]:
    user = user_service.update_user(session, user_id, payload)
    return envelope("User updated successfully", user)


@router.patch("/{user_id}/role", response_model=Envelope[UserRead])
def update_user_role(
    user_id: int,
    payload: RoleUpdate,
    session: SessionDep,
    admin: Annotated[RequestContext, Depends(require_admin)],
) -> dict[str, object]:
    """Change the role assigned to a user."""

    user = user_service.update_user_role(session, user_id, payload.role)
    LOGGER.info(
        "admin_updated_role",
        admin_id=admin.account_id,
        user_id=user.id,
        role=user.role.value,
    )
    return envelope("User role updated successfully", user)


@router.patch("/{user_id}/deactivate", response_model=Envelope[UserRead])
def deactivate_user(
    user_id: int,
    session: SessionDep,
    admin: Annotated[RequestContext, Depends(require_admin)],
) -> dict[str, object]:
    """Deactivate a user account without deleting it."""

    user = user_service.deactivate_user(session, user_id)
    LOGGER.info("admin_deactivated_user", admin_id=admin.account_id, user_id=user.id)
    return envelope("User deactivated successfully", user)


@router.delete("/{user_id}", response_model=Envelope[None])
def delete_user(user_id: int, session: SessionDep) -> dict[str, object]:
    user_service.delete_user(session, user_id)
    return envelope("User deleted successfully")
