"""Shared fixtures for the unit test suite."""

from __future__ import annotations

import datetime as dt
import os
import sys
import uuid
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

# Configure environment before application imports
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_dashboard_ac.db")
os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from dashboard_ac.backend.src.core.passwords import hash_password
from dashboard_ac.backend.src.core.security import get_token_codec
from dashboard_ac.backend.src.db import get_engine, session_scope
from dashboard_ac.backend.src.main import app
from dashboard_ac.backend.src.models import (
    Customer,
    Invoice,
    InvoiceStatus,
    Role,
    Schedule,
    ScheduleStatus,
    Service,
    Technician,
    User,
)
from dashboard_ac.backend.src.models.base import Base

DEFAULT_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def setup_database() -> None:  # type: ignore[no-untyped-def]
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def make_user() -> Callable[..., User]:
    """Return a factory persisting an account with a known password."""

    def _make_user(
        email: str,
        role: Role = Role.CUSTOMER,
        *,
        name: str = "Test User",
        password: str = DEFAULT_PASSWORD,
        is_active: bool = True,
    ) -> User:
        with session_scope() as session:
            user = User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=role,
                is_active=is_active,
            )
            session.add(user)
            session.flush()
        return user

    return _make_user


def bearer(user: User) -> dict[str, str]:
    tokens = get_token_codec().issue(user)
    return {"Authorization": f"Bearer {tokens.access_token}"}


@pytest.fixture()
def admin_headers(make_user) -> dict[str, str]:  # type: ignore[no-untyped-def]
    return bearer(make_user("admin@example.com", Role.ADMIN, name="Admin"))


@pytest.fixture()
def technician_headers(make_user) -> dict[str, str]:  # type: ignore[no-untyped-def]
    return bearer(make_user("tech@example.com", Role.TECHNICIAN, name="Tech"))


@pytest.fixture()
def customer_headers(make_user) -> dict[str, str]:  # type: ignore[no-untyped-def]
    return bearer(make_user("customer@example.com", Role.CUSTOMER, name="Customer"))


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    return bearer


@pytest.fixture()
def billing_records() -> dict[str, uuid.UUID]:
    """Persist a customer, technician, two services, a schedule and an empty invoice."""

    with session_scope() as session:
        customer = Customer(
            name="Budi Santoso",
            phone="081234567890",
            address="Jl. Sudirman No. 10, Jakarta",
            email="budi@example.com",
        )
        technician = Technician(name="Andi", phone="081298765432", specialization="Split AC")
        cleaning = Service(name="AC Cleaning", price=Decimal("150000.00"), duration=60)
        freon = Service(name="Freon Refill", price=Decimal("50000.00"), duration=30)
        session.add_all([customer, technician, cleaning, freon])
        session.flush()

        schedule = Schedule(
            customer_id=customer.id,
            technician_id=technician.id,
            service_id=cleaning.id,
            date=dt.date(2024, 6, 3),
            time=dt.time(9, 30),
            status=ScheduleStatus.PENDING,
        )
        session.add(schedule)
        session.flush()

        invoice = Invoice(
            schedule_id=schedule.id,
            customer_id=customer.id,
            invoice_date=dt.date(2024, 6, 3),
            due_date=dt.date(2024, 6, 17),
            status=InvoiceStatus.UNPAID,
        )
        session.add(invoice)
        session.flush()

        return {
            "customer": customer.id,
            "technician": technician.id,
            "cleaning": cleaning.id,
            "freon": freon.id,
            "schedule": schedule.id,
            "invoice": invoice.id,
        }
