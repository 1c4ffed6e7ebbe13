"""Service catalogue schemas."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ServiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    price: Decimal
    duration: int
    created_at: datetime
    updated_at: datetime


class ServiceCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    duration: int = Field(ge=1, description="Duration in minutes")


class ServiceUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=100)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    duration: int | None = Field(default=None, ge=1)


class ServiceFilters(BaseModel):
    name: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
