"""Service catalogue CRUD operations."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.orm import Session

from ..db import transaction
from ..models import Service
from ..schemas.common import PageParams
from ..schemas.service import ServiceCreate, ServiceFilters, ServiceUpdate
from .queries import active, contains, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)


def get_service(session: Session, service_id: uuid.UUID) -> Service:
    return get_or_404(session, Service, service_id, "Service")


def list_services(session: Session, params: PageParams) -> tuple[list[Service], int]:
    return paginate(session, active(Service).order_by(Service.created_at.desc()), params)


def search_services(
    session: Session, filters: ServiceFilters, params: PageParams
) -> tuple[list[Service], int]:
    """Filter services by name and price range; a zero bound is ignored."""

    stmt = active(Service)
    if filters.name:
        stmt = stmt.where(contains(Service.name, filters.name))
    if filters.min_price:
        stmt = stmt.where(Service.price >= filters.min_price)
    if filters.max_price:
        stmt = stmt.where(Service.price <= filters.max_price)
    return paginate(session, stmt.order_by(Service.created_at.desc()), params)


def create_service(session: Session, payload: ServiceCreate) -> Service:
    with transaction(session):
        service = Service(**payload.model_dump())
        session.add(service)
        session.flush()

    LOGGER.info("service_created", service_id=str(service.id))
    return service


def update_service(session: Session, service_id: uuid.UUID, payload: ServiceUpdate) -> Service:
    """Update catalogue fields.

    Existing invoice line items keep the unit price they were billed at.
    """

    with transaction(session):
        service = get_service(session, service_id)
        for field, value in payload.model_dump(exclude_none=True).items():
            setattr(service, field, value)
        session.flush()
    return service


def delete_service(session: Session, service_id: uuid.UUID) -> None:
    with transaction(session):
        get_service(session, service_id).soft_delete()
    LOGGER.info("service_deleted", service_id=str(service_id))


__all__ = [
    "create_service",
    "delete_service",
    "get_service",
    "list_services",
    "search_services",
    "update_service",
]
