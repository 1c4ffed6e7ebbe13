"""Customer schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    phone: str
    address: str
    email: EmailStr
    created_at: datetime
    updated_at: datetime


class CustomerCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    phone: str = Field(min_length=10, max_length=15)
    address: str = Field(min_length=10, max_length=500)
    email: EmailStr


class CustomerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=100)
    phone: str | None = Field(default=None, min_length=10, max_length=15)
    address: str | None = Field(default=None, min_length=10, max_length=500)
    email: EmailStr | None = None


class CustomerFilters(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
