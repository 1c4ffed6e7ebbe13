"""Schedule CRUD operations."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.orm import Session

from ..db import transaction
from ..models import Customer, Schedule, ScheduleStatus, Service, Technician
from ..schemas.common import PageParams
from ..schemas.schedule import ScheduleCreate, ScheduleFilters, ScheduleUpdate
from .queries import active, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)


def get_schedule(session: Session, schedule_id: uuid.UUID) -> Schedule:
    return get_or_404(session, Schedule, schedule_id, "Schedule")


def list_schedules(session: Session, params: PageParams) -> tuple[list[Schedule], int]:
    return paginate(session, active(Schedule).order_by(Schedule.created_at.desc()), params)


def search_schedules(
    session: Session, filters: ScheduleFilters, params: PageParams
) -> tuple[list[Schedule], int]:
    stmt = active(Schedule)
    if filters.customer_id is not None:
        stmt = stmt.where(Schedule.customer_id == filters.customer_id)
    if filters.technician_id is not None:
        stmt = stmt.where(Schedule.technician_id == filters.technician_id)
    if filters.service_id is not None:
        stmt = stmt.where(Schedule.service_id == filters.service_id)
    if filters.status is not None:
        stmt = stmt.where(Schedule.status == filters.status)
    if filters.date_from is not None:
        stmt = stmt.where(Schedule.date >= filters.date_from)
    if filters.date_to is not None:
        stmt = stmt.where(Schedule.date <= filters.date_to)
    return paginate(session, stmt.order_by(Schedule.created_at.desc()), params)


def create_schedule(session: Session, payload: ScheduleCreate) -> Schedule:
    """Book a pending visit after checking every referenced record exists."""

    with transaction(session):
        get_or_404(session, Customer, payload.customer_id, "Customer")
        get_or_404(session, Technician, payload.technician_id, "Technician")
        get_or_404(session, Service, payload.service_id, "Service")
        schedule = Schedule(**payload.model_dump(), status=ScheduleStatus.PENDING)
        session.add(schedule)
        session.flush()

    LOGGER.info("schedule_created", schedule_id=str(schedule.id))
    return schedule


def update_schedule(
    session: Session, schedule_id: uuid.UUID, payload: ScheduleUpdate
) -> Schedule:
    with transaction(session):
        schedule = get_schedule(session, schedule_id)
        changes = payload.model_dump(exclude_none=True)
        if "technician_id" in changes:
            get_or_404(session, Technician, changes["technician_id"], "Technician")
        if "service_id" in changes:
            get_or_404(session, Service, changes["service_id"], "Service")
        for field, value in changes.items():
            setattr(schedule, field, value)
        session.flush()
    return schedule


def delete_schedule(session: Session, schedule_id: uuid.UUID) -> None:
    with transaction(session):
        get_schedule(session, schedule_id).soft_delete()
    LOGGER.info("schedule_deleted", schedule_id=str(schedule_id))


__all__ = [
    "create_schedule",
    "delete_schedule",
    "get_schedule",
    "list_schedules",
    "search_schedules",
    "update_schedule",
]
