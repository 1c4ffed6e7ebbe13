"""Public API routers exposed by the FastAPI application."""

from . import (
    auth,
    customers,
    health,
    invoice_details,
    invoices,
    schedules,
    services,
    technicians,
    users,
)

__all__ = [
    "auth",
    "customers",
    "health",
    "invoice_details",
    "invoices",
    "schedules",
    "services",
    "technicians",
    "users",
]
