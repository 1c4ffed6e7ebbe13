"""User account model."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Boolean, Enum as SAEnum, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class Role(str, Enum):
    """Closed set of roles an account may hold."""

    ADMIN = "admin"
    TECHNICIAN = "technician"
    CUSTOMER = "customer"


class User(TimestampMixin, Base):
    """Represents an application user account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        SAEnum(
            Role,
            name="user_role",
            native_enum=False,
            length=20,
            validate_strings=True,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=Role.CUSTOMER,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )


__all__ = ["Role", "User"]
