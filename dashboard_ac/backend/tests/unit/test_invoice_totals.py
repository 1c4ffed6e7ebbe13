"""Tests for keeping invoice totals in step with their line items."""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest import mock

import pytest

from dashboard_ac.backend.src.core.errors import NotFoundError
from dashboard_ac.backend.src.db import session_scope
from dashboard_ac.backend.src.models import Invoice, InvoiceDetail
from dashboard_ac.backend.src.schemas.invoice_detail import InvoiceDetailCreate, InvoiceDetailUpdate
from dashboard_ac.backend.src.services import invoice_details, invoice_totals


def _total(invoice_id: uuid.UUID) -> Decimal:
    with session_scope() as session:
        return Decimal(session.get(Invoice, invoice_id).total_amount)


def _add_line(records: dict[str, uuid.UUID], service: str, quantity: int, **extra: object) -> uuid.UUID:
    with session_scope() as session:
        detail = invoice_details.create_invoice_detail(
            session,
            InvoiceDetailCreate(
                invoice_id=records["invoice"],
                service_id=records[service],
                quantity=quantity,
                **extra,
            ),
        )
        return detail.id


def test_new_invoice_starts_at_zero(billing_records: dict[str, uuid.UUID]) -> None:
    assert _total(billing_records["invoice"]) == Decimal("0")


def test_total_follows_create_update_and_delete(billing_records: dict[str, uuid.UUID]) -> None:
    invoice_id = billing_records["invoice"]

    cleaning_line = _add_line(billing_records, "cleaning", 2)
    assert _total(invoice_id) == Decimal("300000.00")

    freon_line = _add_line(billing_records, "freon", 1)
    assert _total(invoice_id) == Decimal("350000.00")

    with session_scope() as session:
        invoice_details.update_invoice_detail(
            session, freon_line, InvoiceDetailUpdate(quantity=3)
        )
    assert _total(invoice_id) == Decimal("450000.00")

    with session_scope() as session:
        invoice_details.delete_invoice_detail(session, cleaning_line)
    assert _total(invoice_id) == Decimal("150000.00")


def test_unit_price_defaults_to_service_price(billing_records: dict[str, uuid.UUID]) -> None:
    default_line = _add_line(billing_records, "cleaning", 1)
    custom_line = _add_line(billing_records, "cleaning", 2, unit_price=Decimal("120000.00"))

    with session_scope() as session:
        default_detail = session.get(InvoiceDetail, default_line)
        custom_detail = session.get(InvoiceDetail, custom_line)
        assert Decimal(default_detail.unit_price) == Decimal("150000.00")
        assert Decimal(custom_detail.subtotal) == Decimal("240000.00")

    assert _total(billing_records["invoice"]) == Decimal("390000.00")


def test_reconcile_is_idempotent(billing_records: dict[str, uuid.UUID]) -> None:
    invoice_id = billing_records["invoice"]
    _add_line(billing_records, "cleaning", 2)

    with session_scope() as session:
        first = invoice_totals.reconcile_invoice_total(session, invoice_id).total_amount
        second = invoice_totals.reconcile_invoice_total(session, invoice_id).total_amount

    assert Decimal(first) == Decimal(second) == Decimal("300000.00")


def test_reconcile_repairs_drifted_total(billing_records: dict[str, uuid.UUID]) -> None:
    invoice_id = billing_records["invoice"]
    _add_line(billing_records, "freon", 1)
    with session_scope() as session:
        session.get(Invoice, invoice_id).total_amount = Decimal("999.00")

    with session_scope() as session:
        invoice_totals.reconcile_invoice_total(session, invoice_id)

    assert _total(invoice_id) == Decimal("50000.00")


def test_reconcile_unknown_invoice_raises() -> None:
    with session_scope() as session:
        with pytest.raises(NotFoundError):
            invoice_totals.reconcile_invoice_total(session, uuid.uuid4())


def test_failed_reconcile_rolls_back_line_item(billing_records: dict[str, uuid.UUID]) -> None:
    invoice_id = billing_records["invoice"]

    with mock.patch.object(
        invoice_details,
        "reconcile_invoice_total",
        side_effect=RuntimeError("boom"),
    ):
        with pytest.raises(RuntimeError):
            _add_line(billing_records, "cleaning", 1)

    with session_scope() as session:
        assert invoice_details.list_details_for_invoice(session, invoice_id) == []
    assert _total(invoice_id) == Decimal("0")


def test_missing_service_is_not_found(billing_records: dict[str, uuid.UUID]) -> None:
    with session_scope() as session:
        with pytest.raises(NotFoundError) as excinfo:
            invoice_details.create_invoice_detail(
                session,
                InvoiceDetailCreate(
                    invoice_id=billing_records["invoice"],
                    service_id=uuid.uuid4(),
                    quantity=1,
                ),
            )
    assert excinfo.value.detail == "Service not found"
