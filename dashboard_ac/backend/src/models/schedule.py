"""Schedule (appointment) model."""

from __future__ import annotations

import datetime as dt
import uuid
from enum import Enum

from sqlalchemy import Date, Enum as SAEnum, ForeignKey, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class ScheduleStatus(str, Enum):
    PENDING = "Pending"
    ON_PROGRESS = "On-Progress"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


class Schedule(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A service visit booked for a customer with a technician."""

    __tablename__ = "schedules"

    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("customers.id"), nullable=False, index=True
    )
    technician_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("technicians.id"), nullable=False, index=True
    )
    service_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("services.id"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    status: Mapped[ScheduleStatus] = mapped_column(
        SAEnum(
            ScheduleStatus,
            name="schedule_status",
            native_enum=False,
            length=20,
            validate_strings=True,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=ScheduleStatus.PENDING,
    )

    customer: Mapped["Customer"] = relationship("Customer")
    technician: Mapped["Technician"] = relationship("Technician")
    service: Mapped["Service"] = relationship("Service")


__all__ = ["Schedule", "ScheduleStatus"]
