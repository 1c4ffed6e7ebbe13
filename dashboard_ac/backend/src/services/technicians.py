"""Technician CRUD operations."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.orm import Session

from ..db import transaction
from ..models import Technician
from ..schemas.common import PageParams
from ..schemas.technician import TechnicianCreate, TechnicianFilters, TechnicianUpdate
from .queries import active, contains, ensure_unique, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)


def get_technician(session: Session, technician_id: uuid.UUID) -> Technician:
    return get_or_404(session, Technician, technician_id, "Technician")


def list_technicians(session: Session, params: PageParams) -> tuple[list[Technician], int]:
    return paginate(session, active(Technician).order_by(Technician.created_at.desc()), params)


def search_technicians(
    session: Session, filters: TechnicianFilters, params: PageParams
) -> tuple[list[Technician], int]:
    stmt = active(Technician)
    if filters.name:
        stmt = stmt.where(contains(Technician.name, filters.name))
    if filters.specialization:
        stmt = stmt.where(contains(Technician.specialization, filters.specialization))
    return paginate(session, stmt.order_by(Technician.created_at.desc()), params)


def create_technician(session: Session, payload: TechnicianCreate) -> Technician:
    with transaction(session):
        ensure_unique(
            session, Technician.phone, payload.phone, "Technician phone is already taken"
        )
        technician = Technician(**payload.model_dump())
        session.add(technician)
        session.flush()

    LOGGER.info("technician_created", technician_id=str(technician.id))
    return technician


def update_technician(
    session: Session, technician_id: uuid.UUID, payload: TechnicianUpdate
) -> Technician:
    with transaction(session):
        technician = get_technician(session, technician_id)
        changes = payload.model_dump(exclude_none=True)
        if "phone" in changes:
            ensure_unique(
                session,
                Technician.phone,
                changes["phone"],
                "Technician phone is already taken",
                exclude_id=technician.id,
            )
        for field, value in changes.items():
            setattr(technician, field, value)
        session.flush()
    return technician


def delete_technician(session: Session, technician_id: uuid.UUID) -> None:
    with transaction(session):
        get_technician(session, technician_id).soft_delete()
    LOGGER.info("technician_deleted", technician_id=str(technician_id))


__all__ = [
    "create_technician",
    "delete_technician",
    "get_technician",
    "list_technicians",
    "search_technicians",
    "update_technician",
]
