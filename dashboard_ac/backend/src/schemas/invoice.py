"""Invoice schemas."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from ..models.invoice import InvoiceStatus
from .invoice_detail import InvoiceDetailRead


class InvoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    schedule_id: uuid.UUID
    customer_id: uuid.UUID
    invoice_date: date
    due_date: date
    total_amount: Decimal
    status: InvoiceStatus
    created_at: datetime
    updated_at: datetime


class InvoiceWithDetails(InvoiceRead):
    details: list[InvoiceDetailRead] = []


class InvoiceCreate(BaseModel):
    schedule_id: uuid.UUID
    customer_id: uuid.UUID
    invoice_date: date
    due_date: date


class InvoiceUpdate(BaseModel):
    """Mutable invoice fields; ``total_amount`` is derived and not accepted."""

    invoice_date: date | None = None
    due_date: date | None = None
    status: InvoiceStatus | None = None


class InvoiceFilters(BaseModel):
    customer_id: uuid.UUID | None = None
    schedule_id: uuid.UUID | None = None
    status: InvoiceStatus | None = None
    date_from: date | None = None
    date_to: date | None = None
