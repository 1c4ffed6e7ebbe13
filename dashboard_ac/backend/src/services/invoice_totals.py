"""Keeps an invoice's stored total equal to the sum of its line items."""

from __future__ import annotations

import uuid
from decimal import Decimal

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..core.errors import NotFoundError, ValidationError
from ..models import Invoice, InvoiceDetail
from .metrics import invoice_reconcile_seconds
from .queries import active

LOGGER = structlog.get_logger(__name__)

# Largest value a Numeric(12, 2) amount column holds.
MAX_AMOUNT = Decimal("9999999999.99")


def check_amount(amount: Decimal, label: str) -> None:
    if amount > MAX_AMOUNT:
        raise ValidationError(f"{label} must not exceed {MAX_AMOUNT}")


def sum_line_items(session: Session, invoice_id: uuid.UUID) -> Decimal:
    """Return the sum of subtotals over the invoice's live line items."""

    total = session.scalar(
        select(func.coalesce(func.sum(InvoiceDetail.subtotal), 0)).where(
            InvoiceDetail.invoice_id == invoice_id,
            InvoiceDetail.deleted_at.is_(None),
        )
    )
    return Decimal(total or 0).quantize(Decimal("0.01"))


def reconcile_invoice_total(session: Session, invoice_id: uuid.UUID) -> Invoice:
    """Recompute and store ``total_amount`` for ``invoice_id``.

    Must run inside the same transaction as the line-item change that
    triggered it. The invoice row is locked first so concurrent line-item
    writes on one invoice serialise on databases that support row locks.
    Calling it again without an intervening change leaves the total as is.
    """

    with invoice_reconcile_seconds.time():
        session.flush()
        invoice = session.scalars(
            active(Invoice).where(Invoice.id == invoice_id).with_for_update()
        ).one_or_none()
        if invoice is None:
            raise NotFoundError("Invoice not found")

        total = sum_line_items(session, invoice_id)
        check_amount(total, "Invoice total")
        if invoice.total_amount is None or Decimal(invoice.total_amount) != total:
            invoice.total_amount = total
            session.flush()
    LOGGER.info(
        "invoice_total_reconciled",
        invoice_id=str(invoice_id),
        total_amount=str(total),
    )
    return invoice


__all__ = ["MAX_AMOUNT", "check_amount", "reconcile_invoice_total", "sum_line_items"]
