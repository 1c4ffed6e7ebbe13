"""Technician schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TechnicianRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    phone: str
    specialization: str
    created_at: datetime
    updated_at: datetime


class TechnicianCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    phone: str = Field(min_length=10, max_length=15)
    specialization: str = Field(min_length=2, max_length=100)


class TechnicianUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=100)
    phone: str | None = Field(default=None, min_length=10, max_length=15)
    specialization: str | None = Field(default=None, min_length=2, max_length=100)


class TechnicianFilters(BaseModel):
    name: str | None = None
    specialization: str | None = None
