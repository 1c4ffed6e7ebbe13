"""Invoice model."""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from enum import Enum

from sqlalchemy import Date, Enum as SAEnum, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class InvoiceStatus(str, Enum):
    UNPAID = "Unpaid"
    PAID = "Paid"
    OVERDUE = "Overdue"


class Invoice(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Represents an invoice billed against a completed schedule.

    ``total_amount`` is derived from the invoice's line items and is only
    written by :func:`~dashboard_ac.backend.src.services.invoice_totals.reconcile_invoice_total`.
    """

    __tablename__ = "invoices"

    schedule_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("schedules.id"), nullable=False, index=True
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("customers.id"), nullable=False, index=True
    )
    invoice_date: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0")
    )
    status: Mapped[InvoiceStatus] = mapped_column(
        SAEnum(
            InvoiceStatus,
            name="invoice_status",
            native_enum=False,
            length=20,
            validate_strings=True,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=InvoiceStatus.UNPAID,
    )

    details: Mapped[list["InvoiceDetail"]] = relationship(
        "InvoiceDetail",
        primaryjoin="and_(Invoice.id == InvoiceDetail.invoice_id, InvoiceDetail.deleted_at.is_(None))",
        order_by="InvoiceDetail.created_at",
        viewonly=True,
    )


__all__ = ["Invoice", "InvoiceStatus"]
