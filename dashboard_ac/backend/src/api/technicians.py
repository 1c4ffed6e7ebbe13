"""Technician endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import require_admin, require_admin_or_technician
from ..db import get_session_dependency
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.technician import (
    TechnicianCreate,
    TechnicianFilters,
    TechnicianRead,
    TechnicianUpdate,
)
from ..services import technicians as technician_service

router = APIRouter(
    prefix="/technicians",
    tags=["technicians"],
    dependencies=[Depends(require_admin_or_technician)],
)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


@router.get("", response_model=PaginatedEnvelope[TechnicianRead])
def list_technicians(session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = technician_service.list_technicians(session, params)
    return paginated("Technicians retrieved successfully", items, total, params)


@router.get("/search", response_model=PaginatedEnvelope[TechnicianRead])
def search_technicians(
    session: SessionDep,
    params: PageDep,
    filters: Annotated[TechnicianFilters, Depends()],
) -> dict[str, object]:
    items, total = technician_service.search_technicians(session, filters, params)
    return paginated("Technicians retrieved successfully", items, total, params)


@router.get("/{technician_id}", response_model=Envelope[TechnicianRead])
def get_technician(technician_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    return envelope(
        "Technician retrieved successfully",
        technician_service.get_technician(session, technician_id),
    )


@router.post(
    "",
    response_model=Envelope[TechnicianRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_technician(payload: TechnicianCreate, session: SessionDep) -> dict[str, object]:
    technician = technician_service.create_technician(session, payload)
    return envelope("Technician created successfully", technician)


@router.put(
    "/{technician_id}",
    response_model=Envelope[TechnicianRead],
    dependencies=[Depends(require_admin)],
)
def update_technician(
    technician_id: uuid.UUID, payload: TechnicianUpdate, session: SessionDep
) -> dict[str, object]:
    technician = technician_service.update_technician(session, technician_id, payload)
    return envelope("Technician updated successfully", technician)


@router.delete(
    "/{technician_id}",
    response_model=Envelope[None],
    dependencies=[Depends(require_admin)],
)
def delete_technician(technician_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    technician_service.delete_technician(session, technician_id)
    return envelope("Technician deleted successfully")
