"""ORM models exposed for easy imports."""

from .customer import Customer
from .invoice import Invoice, InvoiceStatus
from .invoice_detail import InvoiceDetail
from .schedule import Schedule, ScheduleStatus
from .service import Service
from .technician import Technician
from .user import Role, User

__all__ = [
    "Customer",
    "Invoice",
    "InvoiceDetail",
    "InvoiceStatus",
    "Role",
    "Schedule",
    "ScheduleStatus",
    "Service",
    "Technician",
    "User",
]
