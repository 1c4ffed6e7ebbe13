"""Service catalogue endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import require_admin, require_any_role
from ..db import get_session_dependency
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.service import ServiceCreate, ServiceFilters, ServiceRead, ServiceUpdate
from ..services import catalog

router = APIRouter(
    prefix="/services",
    tags=["services"],
    dependencies=[Depends(require_any_role)],
)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


@router.get("", response_model=PaginatedEnvelope[ServiceRead])
def list_services(session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = catalog.list_services(session, params)
    return paginated("Services retrieved successfully", items, total, params)


@router.get("/search", response_model=PaginatedEnvelope[ServiceRead])
def search_services(
    session: SessionDep,
    params: PageDep,
    filters: Annotated[ServiceFilters, Depends()],
) -> dict[str, object]:
    """Search by name and price range; a zero bound is ignored."""

    items, total = catalog.search_services(session, filters, params)
    return paginated("Services retrieved successfully", items, total, params)


@router.get("/{service_id}", response_model=Envelope[ServiceRead])
def get_service(service_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    return envelope("Service retrieved successfully", catalog.get_service(session, service_id))


@router.post(
    "",
    response_model=Envelope[ServiceRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_service(payload: ServiceCreate, session: SessionDep) -> dict[str, object]:
    return envelope("Service created successfully", catalog.create_service(session, payload))


@router.put(
    "/{service_id}",
    response_model=Envelope[ServiceRead],
    dependencies=[Depends(require_admin)],
)
def update_service(
    service_id: uuid.UUID, payload: ServiceUpdate, session: SessionDep
) -> dict[str, object]:
    service = catalog.update_service(session, service_id, payload)
    return envelope("Service updated successfully", service)


@router.delete(
    "/{service_id}",
    response_model=Envelope[None],
    dependencies=[Depends(require_admin)],
)
def delete_service(service_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    catalog.delete_service(session, service_id)
    return envelope("Service deleted successfully")
