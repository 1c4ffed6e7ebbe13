"""Customer CRUD operations."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.orm import Session

from ..db import transaction
from ..models import Customer
from ..schemas.common import PageParams
from ..schemas.customer import CustomerCreate, CustomerFilters, CustomerUpdate
from .queries import active, contains, ensure_unique, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)


def get_customer(session: Session, customer_id: uuid.UUID) -> Customer:
    return get_or_404(session, Customer, customer_id, "Customer")


def list_customers(session: Session, params: PageParams) -> tuple[list[Customer], int]:
    return paginate(session, active(Customer).order_by(Customer.created_at.desc()), params)


def search_customers(
    session: Session, filters: CustomerFilters, params: PageParams
) -> tuple[list[Customer], int]:
    stmt = active(Customer)
    if filters.name:
        stmt = stmt.where(contains(Customer.name, filters.name))
    if filters.phone:
        stmt = stmt.where(contains(Customer.phone, filters.phone))
    if filters.email:
        stmt = stmt.where(contains(Customer.email, filters.email))
    return paginate(session, stmt.order_by(Customer.created_at.desc()), params)


def create_customer(session: Session, payload: CustomerCreate) -> Customer:
    with transaction(session):
        ensure_unique(session, Customer.email, payload.email, "Customer email is already taken")
        ensure_unique(session, Customer.phone, payload.phone, "Customer phone is already taken")
        customer = Customer(**payload.model_dump())
        session.add(customer)
        session.flush()

    LOGGER.info("customer_created", customer_id=str(customer.id))
    return customer


def update_customer(
    session: Session, customer_id: uuid.UUID, payload: CustomerUpdate
) -> Customer:
    with transaction(session):
        customer = get_customer(session, customer_id)
        changes = payload.model_dump(exclude_none=True)
        if "email" in changes:
            ensure_unique(
                session,
                Customer.email,
                changes["email"],
                "Customer email is already taken",
                exclude_id=customer.id,
            )
        if "phone" in changes:
            ensure_unique(
                session,
                Customer.phone,
                changes["phone"],
                "Customer phone is already taken",
                exclude_id=customer.id,
            )
        for field, value in changes.items():
            setattr(customer, field, value)
        session.flush()
    return customer


def delete_customer(session: Session, customer_id: uuid.UUID) -> None:
    with transaction(session):
        get_customer(session, customer_id).soft_delete()
    LOGGER.info("customer_deleted", customer_id=str(customer_id))


__all__ = [
    "create_customer",
    "delete_customer",
    "get_customer",
    "list_customers",
    "search_customers",
    "update_customer",
]
