"""Customer endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import require_admin, require_admin_or_technician
from ..db import get_session_dependency
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.customer import CustomerCreate, CustomerFilters, CustomerRead, CustomerUpdate
from ..services import customers as customer_service

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    dependencies=[Depends(require_admin_or_technician)],
)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


@router.get("", response_model=PaginatedEnvelope[CustomerRead])
def list_customers(session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = customer_service.list_customers(session, params)
    return paginated("Customers retrieved successfully", items, total, params)


@router.get("/search", response_model=PaginatedEnvelope[CustomerRead])
def search_customers(
    session: SessionDep,
    params: PageDep,
    filters: Annotated[CustomerFilters, Depends()],
) -> dict[str, object]:
    """Case-insensitive substring search on name, phone and email."""

    items, total = customer_service.search_customers(session, filters, params)
    return paginated("Customers retrieved successfully", items, total, params)


@router.get("/{customer_id}", response_model=Envelope[CustomerRead])
def get_customer(customer_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    return envelope(
        "Customer retrieved successfully",
        customer_service.get_customer(session, customer_id),
    )


@router.post("", response_model=Envelope[CustomerRead], status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, session: SessionDep) -> dict[str, object]:
    customer = customer_service.create_customer(session, payload)
    return envelope("Customer created successfully", customer)


@router.put("/{customer_id}", response_model=Envelope[CustomerRead])
def update_customer(
    customer_id: uuid.UUID, payload: CustomerUpdate, session: SessionDep
) -> dict[str, object]:
    customer = customer_service.update_customer(session, customer_id, payload)
    return envelope("Customer updated successfully", customer)


@router.delete(
    "/{customer_id}",
    response_model=Envelope[None],
    dependencies=[Depends(require_admin)],
)
def delete_customer(customer_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    customer_service.delete_customer(session, customer_id)
    return envelope("Customer deleted successfully")
