"""Invoice line item model."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class InvoiceDetail(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A single billed service on an invoice."""

    __tablename__ = "invoice_details"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_invoice_details_quantity_positive"),
        CheckConstraint("unit_price >= 0", name="ck_invoice_details_unit_price_non_negative"),
    )

    invoice_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("invoices.id"), nullable=False, index=True
    )
    service_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("services.id"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    invoice: Mapped["Invoice"] = relationship("Invoice")

    def recalculate_subtotal(self) -> Decimal:
        """Recompute ``subtotal`` from quantity and unit price."""

        self.subtotal = Decimal(self.unit_price) * self.quantity
        return self.subtotal


__all__ = ["InvoiceDetail"]
