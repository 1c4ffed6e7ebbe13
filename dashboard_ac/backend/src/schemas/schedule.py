"""Schedule schemas."""

from __future__ import annotations

import datetime as dt
import uuid

from pydantic import BaseModel, ConfigDict

from ..models.schedule import ScheduleStatus


class ScheduleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    customer_id: uuid.UUID
    technician_id: uuid.UUID
    service_id: uuid.UUID
    date: dt.date
    time: dt.time
    status: ScheduleStatus
    created_at: dt.datetime
    updated_at: dt.datetime


class ScheduleCreate(BaseModel):
    customer_id: uuid.UUID
    technician_id: uuid.UUID
    service_id: uuid.UUID
    date: dt.date
    time: dt.time


class ScheduleUpdate(BaseModel):
    technician_id: uuid.UUID | None = None
    service_id: uuid.UUID | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    status: ScheduleStatus | None = None


class ScheduleFilters(BaseModel):
    customer_id: uuid.UUID | None = None
    technician_id: uuid.UUID | None = None
    service_id: uuid.UUID | None = None
    status: ScheduleStatus | None = None
    date_from: dt.date | None = None
    date_to: dt.date | None = None
