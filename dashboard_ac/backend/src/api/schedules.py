"""Schedule endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import require_admin, require_admin_or_technician
from ..db import get_session_dependency
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.schedule import ScheduleCreate, ScheduleFilters, ScheduleRead, ScheduleUpdate
from ..services import schedules as schedule_service

router = APIRouter(
    prefix="/schedules",
    tags=["schedules"],
    dependencies=[Depends(require_admin_or_technician)],
)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


@router.get("", response_model=PaginatedEnvelope[ScheduleRead])
def list_schedules(session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = schedule_service.list_schedules(session, params)
    return paginated("Schedules retrieved successfully", items, total, params)


@router.get("/search", response_model=PaginatedEnvelope[ScheduleRead])
def search_schedules(
    session: SessionDep,
    params: PageDep,
    filters: Annotated[ScheduleFilters, Depends()],
) -> dict[str, object]:
    items, total = schedule_service.search_schedules(session, filters, params)
    return paginated("Schedules retrieved successfully", items, total, params)


@router.get("/{schedule_id}", response_model=Envelope[ScheduleRead])
def get_schedule(schedule_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    return envelope(
        "Schedule retrieved successfully",
        schedule_service.get_schedule(session, schedule_id),
    )


@router.post("", response_model=Envelope[ScheduleRead], status_code=status.HTTP_201_CREATED)
def create_schedule(payload: ScheduleCreate, session: SessionDep) -> dict[str, object]:
    """Book a visit; the schedule starts out pending."""

    schedule = schedule_service.create_schedule(session, payload)
    return envelope("Schedule created successfully", schedule)


@router.put("/{schedule_id}", response_model=Envelope[ScheduleRead])
def update_schedule(
    schedule_id: uuid.UUID, payload: ScheduleUpdate, session: SessionDep
) -> dict[str, object]:
    schedule = schedule_service.update_schedule(session, schedule_id, payload)
    return envelope("Schedule updated successfully", schedule)


@router.delete(
    "/{schedule_id}",
    response_model=Envelope[None],
    dependencies=[Depends(require_admin)],
)
def delete_schedule(schedule_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    schedule_service.delete_schedule(session, schedule_id)
    return envelope("Schedule deleted successfully")
