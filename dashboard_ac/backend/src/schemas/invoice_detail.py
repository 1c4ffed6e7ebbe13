"""Invoice line item schemas."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

MAX_QUANTITY = 10_000


class InvoiceDetailRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    invoice_id: uuid.UUID
    service_id: uuid.UUID
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    created_at: datetime
    updated_at: datetime


class InvoiceDetailCreate(BaseModel):
    """Line item payload.

    ``unit_price`` defaults to the referenced service's catalogue price.
    The subtotal is always computed and never accepted from clients.
    """

    invoice_id: uuid.UUID
    service_id: uuid.UUID
    quantity: int = Field(ge=1, le=MAX_QUANTITY)
    unit_price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class InvoiceDetailUpdate(BaseModel):
    quantity: int | None = Field(default=None, ge=1, le=MAX_QUANTITY)
    unit_price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class InvoiceDetailFilters(BaseModel):
    invoice_id: uuid.UUID | None = None
    service_id: uuid.UUID | None = None
