"""Invoice line item operations.

Every mutation writes the line item and reconciles the parent invoice's
total inside one transaction.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import structlog
from sqlalchemy.orm import Session

from ..db import transaction
from ..models import Invoice, InvoiceDetail, Service
from ..schemas.common import PageParams
from ..schemas.invoice_detail import InvoiceDetailCreate, InvoiceDetailFilters, InvoiceDetailUpdate
from .invoice_totals import check_amount, reconcile_invoice_total
from .queries import active, get_or_404, paginate

LOGGER = structlog.get_logger(__name__)


def get_invoice_detail(session: Session, detail_id: uuid.UUID) -> InvoiceDetail:
    return get_or_404(session, InvoiceDetail, detail_id, "Invoice detail")


def list_details_for_invoice(session: Session, invoice_id: uuid.UUID) -> list[InvoiceDetail]:
    """Return the live line items of an invoice, oldest first."""

    get_or_404(session, Invoice, invoice_id, "Invoice")
    stmt = (
        active(InvoiceDetail)
        .where(InvoiceDetail.invoice_id == invoice_id)
        .order_by(InvoiceDetail.created_at.asc())
    )
    return list(session.scalars(stmt).all())


def list_invoice_details(
    session: Session, params: PageParams
) -> tuple[list[InvoiceDetail], int]:
    return paginate(
        session, active(InvoiceDetail).order_by(InvoiceDetail.created_at.desc()), params
    )


def search_invoice_details(
    session: Session, filters: InvoiceDetailFilters, params: PageParams
) -> tuple[list[InvoiceDetail], int]:
    stmt = active(InvoiceDetail)
    if filters.invoice_id is not None:
        stmt = stmt.where(InvoiceDetail.invoice_id == filters.invoice_id)
    if filters.service_id is not None:
        stmt = stmt.where(InvoiceDetail.service_id == filters.service_id)
    return paginate(session, stmt.order_by(InvoiceDetail.created_at.desc()), params)


def create_invoice_detail(session: Session, payload: InvoiceDetailCreate) -> InvoiceDetail:
    """Add a line item and update the invoice total."""

    with transaction(session):
        get_or_404(session, Invoice, payload.invoice_id, "Invoice")
        service = get_or_404(session, Service, payload.service_id, "Service")

        unit_price = payload.unit_price if payload.unit_price is not None else service.price
        detail = InvoiceDetail(
            invoice_id=payload.invoice_id,
            service_id=payload.service_id,
            quantity=payload.quantity,
            unit_price=Decimal(unit_price),
        )
        detail.recalculate_subtotal()
        check_amount(detail.subtotal, "Subtotal")
        session.add(detail)
        reconcile_invoice_total(session, payload.invoice_id)

    LOGGER.info(
        "invoice_detail_created",
        invoice_id=str(detail.invoice_id),
        detail_id=str(detail.id),
        subtotal=str(detail.subtotal),
    )
    return detail


def update_invoice_detail(
    session: Session, detail_id: uuid.UUID, payload: InvoiceDetailUpdate
) -> InvoiceDetail:
    """Change quantity and/or unit price and update the invoice total."""

    with transaction(session):
        detail = get_invoice_detail(session, detail_id)
        if payload.quantity is not None:
            detail.quantity = payload.quantity
        if payload.unit_price is not None:
            detail.unit_price = payload.unit_price
        detail.recalculate_subtotal()
        check_amount(detail.subtotal, "Subtotal")
        reconcile_invoice_total(session, detail.invoice_id)

    LOGGER.info("invoice_detail_updated", detail_id=str(detail.id), subtotal=str(detail.subtotal))
    return detail


def delete_invoice_detail(session: Session, detail_id: uuid.UUID) -> None:
    """Soft-delete a line item and update the invoice total."""

    with transaction(session):
        detail = get_invoice_detail(session, detail_id)
        detail.soft_delete()
        reconcile_invoice_total(session, detail.invoice_id)

    LOGGER.info("invoice_detail_deleted", detail_id=str(detail_id))


__all__ = [
    "create_invoice_detail",
    "delete_invoice_detail",
    "get_invoice_detail",
    "list_details_for_invoice",
    "list_invoice_details",
    "search_invoice_details",
    "update_invoice_detail",
]
