"""Invoice line item endpoints.

Every write also refreshes the parent invoice's ``total_amount``.
"""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import require_admin, require_admin_or_technician
from ..db import get_session_dependency
from ..schemas.common import Envelope, PageParams, PaginatedEnvelope, envelope, page_params, paginated
from ..schemas.invoice_detail import (
    InvoiceDetailCreate,
    InvoiceDetailFilters,
    InvoiceDetailRead,
    InvoiceDetailUpdate,
)
from ..services import invoice_details as invoice_detail_service

router = APIRouter(
    prefix="/invoice-details",
    tags=["invoice-details"],
    dependencies=[Depends(require_admin_or_technician)],
)

SessionDep = Annotated[Session, Depends(get_session_dependency)]
PageDep = Annotated[PageParams, Depends(page_params)]


@router.get("", response_model=PaginatedEnvelope[InvoiceDetailRead])
def list_invoice_details(session: SessionDep, params: PageDep) -> dict[str, object]:
    items, total = invoice_detail_service.list_invoice_details(session, params)
    return paginated("Invoice details retrieved successfully", items, total, params)


@router.get("/search", response_model=PaginatedEnvelope[InvoiceDetailRead])
def search_invoice_details(
    session: SessionDep,
    params: PageDep,
    filters: Annotated[InvoiceDetailFilters, Depends()],
) -> dict[str, object]:
    items, total = invoice_detail_service.search_invoice_details(session, filters, params)
    return paginated("Invoice details retrieved successfully", items, total, params)


@router.get("/{detail_id}", response_model=Envelope[InvoiceDetailRead])
def get_invoice_detail(detail_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    return envelope(
        "Invoice detail retrieved successfully",
        invoice_detail_service.get_invoice_detail(session, detail_id),
    )


@router.post(
    "",
    response_model=Envelope[InvoiceDetailRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_invoice_detail(payload: InvoiceDetailCreate, session: SessionDep) -> dict[str, object]:
    detail = invoice_detail_service.create_invoice_detail(session, payload)
    return envelope("Invoice detail created successfully", detail)


@router.put(
    "/{detail_id}",
    response_model=Envelope[InvoiceDetailRead],
    dependencies=[Depends(require_admin)],
)
def update_invoice_detail(
    detail_id: uuid.UUID, payload: InvoiceDetailUpdate, session: SessionDep
) -> dict[str, object]:
    detail = invoice_detail_service.update_invoice_detail(session, detail_id, payload)
    return envelope("Invoice detail updated successfully", detail)


@router.delete(
    "/{detail_id}",
    response_model=Envelope[None],
    dependencies=[Depends(require_admin)],
)
def delete_invoice_detail(detail_id: uuid.UUID, session: SessionDep) -> dict[str, object]:
    invoice_detail_service.delete_invoice_detail(session, detail_id)
    return envelope("Invoice detail deleted successfully")
