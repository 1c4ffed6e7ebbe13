"""Technician model."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Technician(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A field technician who carries out scheduled services."""

    __tablename__ = "technicians"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(15), unique=True, nullable=False)
    specialization: Mapped[str] = mapped_column(String(100), nullable=False)


__all__ = ["Technician"]
