"""Invoice CRUD operations."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy import update
from sqlalchemy.orm import Session

from ..db import transaction
from ..models import Customer, Invoice, InvoiceDetail, InvoiceStatus, Schedule
from ..models.base import utcnow
from ..schemas.common import PageParams
from ..schemas.invoice import InvoiceCreate, InvoiceFilters, InvoiceUpdate
from .queries import active, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)


def get_invoice(session: Session, invoice_id: uuid.UUID) -> Invoice:
    return get_or_404(session, Invoice, invoice_id, "Invoice")


def list_invoices(session: Session, params: PageParams) -> tuple[list[Invoice], int]:
    return paginate(session, active(Invoice).order_by(Invoice.created_at.desc()), params)


def search_invoices(
    session: Session, filters: InvoiceFilters, params: PageParams
) -> tuple[list[Invoice], int]:
    """Filter invoices by customer, schedule, status and invoice date range."""

    stmt = active(Invoice)
    if filters.customer_id is not None:
        stmt = stmt.where(Invoice.customer_id == filters.customer_id)
    if filters.schedule_id is not None:
        stmt = stmt.where(Invoice.schedule_id == filters.schedule_id)
    if filters.status is not None:
        stmt = stmt.where(Invoice.status == filters.status)
    if filters.date_from is not None:
        stmt = stmt.where(Invoice.invoice_date >= filters.date_from)
    if filters.date_to is not None:
        stmt = stmt.where(Invoice.invoice_date <= filters.date_to)
    return paginate(session, stmt.order_by(Invoice.created_at.desc()), params)


def create_invoice(session: Session, payload: InvoiceCreate) -> Invoice:
    """Create an unpaid invoice with a zero total."""

    with transaction(session):
        get_or_404(session, Customer, payload.customer_id, "Customer")
        get_or_404(session, Schedule, payload.schedule_id, "Schedule")
        invoice = Invoice(
            customer_id=payload.customer_id,
            schedule_id=payload.schedule_id,
            invoice_date=payload.invoice_date,
            due_date=payload.due_date,
            status=InvoiceStatus.UNPAID,
        )
        session.add(invoice)
        session.flush()

    LOGGER.info("invoice_created", invoice_id=str(invoice.id))
    return invoice


def update_invoice(session: Session, invoice_id: uuid.UUID, payload: InvoiceUpdate) -> Invoice:
    with transaction(session):
        invoice = get_invoice(session, invoice_id)
        if payload.invoice_date is not None:
            invoice.invoice_date = payload.invoice_date
        if payload.due_date is not None:
            invoice.due_date = payload.due_date
        if payload.status is not None:
            invoice.status = payload.status
        session.flush()
    return invoice


def delete_invoice(session: Session, invoice_id: uuid.UUID) -> None:
    """Soft-delete an invoice together with its line items."""

    with transaction(session):
        invoice = get_invoice(session, invoice_id)
        deleted_at = utcnow()
        session.execute(
            update(InvoiceDetail)
            .where(
                InvoiceDetail.invoice_id == invoice.id,
                InvoiceDetail.deleted_at.is_(None),
            )
            .values(deleted_at=deleted_at)
        )
        invoice.deleted_at = deleted_at

    LOGGER.info("invoice_deleted", invoice_id=str(invoice_id))


__all__ = [
    "create_invoice",
    "delete_invoice",
    "get_invoice",
    "list_invoices",
    "search_invoices",
    "update_invoice",
]
