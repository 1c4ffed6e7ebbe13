"""Invoice endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import require_admin, require_admin_or_technician
from ..db import get_session_dependency
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.invoice import (
    InvoiceCreate,
    InvoiceFilters,
    InvoiceRead,
    InvoiceUpdate,
    InvoiceWithDetails,
)
from ..schemas.invoice_detail import InvoiceDetailRead
from ..services import invoice_details as invoice_detail_service
from ..services import invoices as invoice_service

router = APIRouter(
    prefix="/invoices",
    tags=["invoices"],
    dependencies=[Depends(require_admin_or_technician)],
)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


@router.get("", response_model=PaginatedEnvelope[InvoiceRead])
def list_invoices(session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = invoice_service.list_invoices(session, params)
    return paginated("Invoices retrieved successfully", items, total, params)


@router.get("/search", response_model=PaginatedEnvelope[InvoiceRead])
def search_invoices(
    session: SessionDep,
    params: PageDep,
    filters: Annotated[InvoiceFilters, Depends()],
) -> dict[str, object]:
    items, total = invoice_service.search_invoices(session, filters, params)
    return paginated("Invoices retrieved successfully", items, total, params)


@router.get("/{invoice_id}", response_model=Envelope[InvoiceWithDetails])
def get_invoice(invoice_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    """Return an invoice together with its live line items."""

    return envelope(
        "Invoice retrieved successfully",
        invoice_service.get_invoice(session, invoice_id),
    )


@router.get("/{invoice_id}/details", response_model=Envelope[list[InvoiceDetailRead]])
def list_details_for_invoice(invoice_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    details = invoice_detail_service.list_details_for_invoice(session, invoice_id)
    return envelope("Invoice details retrieved successfully", details)


@router.post(
    "",
    response_model=Envelope[InvoiceRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_invoice(payload: InvoiceCreate, session: SessionDep) -> dict[str, object]:
    """Open an unpaid invoice with a zero total."""

    invoice = invoice_service.create_invoice(session, payload)
    return envelope("Invoice created successfully", invoice)


@router.put(
    "/{invoice_id}",
    response_model=Envelope[InvoiceRead],
    dependencies=[Depends(require_admin)],
)
def update_invoice(
    invoice_id: uuid.UUID, payload: InvoiceUpdate, session: SessionDep
) -> dict[str, object]:
    invoice = invoice_service.update_invoice(session, invoice_id, payload)
    return envelope("Invoice updated successfully", invoice)


@router.delete(
    "/{invoice_id}",
    response_model=Envelope[None],
    dependencies=[Depends(require_admin)],
)
def delete_invoice(invoice_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    """Soft-delete an invoice and its line items."""

    invoice_service.delete_invoice(session, invoice_id)
    return envelope("Invoice deleted successfully")
