"""API tests for invoices and their line items."""

from __future__ import annotations

import uuid
from decimal import Decimal

from fastapi.testclient import TestClient

from dashboard_ac.backend.src.db import session_scope
from dashboard_ac.backend.src.models import InvoiceDetail


def _add_detail(
    client: TestClient,
    headers: dict[str, str],
    invoice_id: uuid.UUID,
    service_id: uuid.UUID,
    quantity: int,
) -> dict[str, object]:
    response = client.post(
        "/api/v1/invoice-details",
        json={
            "invoice_id": str(invoice_id),
            "service_id": str(service_id),
            "quantity": quantity,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_invoice_starts_unpaid_with_zero_total(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    response = client.post(
        "/api/v1/invoices",
        json={
            "schedule_id": str(billing_records["schedule"]),
            "customer_id": str(billing_records["customer"]),
            "invoice_date": "2024-06-10",
            "due_date": "2024-06-24",
            "total_amount": "999999",
        },
        headers=admin_headers,
    )

    assert response.status_code == 201, response.text
    data = response.json()["data"]
    assert data["status"] == "Unpaid"
    assert Decimal(data["total_amount"]) == Decimal("0")


def test_create_invoice_with_unknown_customer_is_not_found(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    response = client.post(
        "/api/v1/invoices",
        json={
            "schedule_id": str(billing_records["schedule"]),
            "customer_id": str(uuid.uuid4()),
            "invoice_date": "2024-06-10",
            "due_date": "2024-06-24",
        },
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Customer not found"


def test_detail_writes_keep_invoice_total_current(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    invoice_id = billing_records["invoice"]

    cleaning = _add_detail(client, admin_headers, invoice_id, billing_records["cleaning"], 2)
    assert Decimal(cleaning["subtotal"]) == Decimal("300000.00")
    _add_detail(client, admin_headers, invoice_id, billing_records["freon"], 1)

    invoice = client.get(f"/api/v1/invoices/{invoice_id}", headers=admin_headers).json()["data"]
    assert Decimal(invoice["total_amount"]) == Decimal("350000.00")
    assert len(invoice["details"]) == 2

    updated = client.put(
        f"/api/v1/invoice-details/{cleaning['id']}",
        json={"unit_price": "100000.00"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert Decimal(updated.json()["data"]["subtotal"]) == Decimal("200000.00")

    deleted = client.delete(f"/api/v1/invoice-details/{cleaning['id']}", headers=admin_headers)
    assert deleted.status_code == 200

    invoice = client.get(f"/api/v1/invoices/{invoice_id}", headers=admin_headers).json()["data"]
    assert Decimal(invoice["total_amount"]) == Decimal("50000.00")
    assert [Decimal(d["subtotal"]) for d in invoice["details"]] == [Decimal("50000.00")]


def test_list_details_for_invoice(
    client: TestClient,
    technician_headers: dict[str, str],
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    invoice_id = billing_records["invoice"]
    _add_detail(client, admin_headers, invoice_id, billing_records["cleaning"], 1)

    response = client.get(f"/api/v1/invoices/{invoice_id}/details", headers=technician_headers)

    assert response.status_code == 200
    assert len(response.json()["data"]) == 1


def test_detail_validation(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    response = client.post(
        "/api/v1/invoice-details",
        json={
            "invoice_id": str(billing_records["invoice"]),
            "service_id": str(billing_records["cleaning"]),
            "quantity": 0,
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"][0]["field"] == "quantity"


def test_technician_cannot_write_details(
    client: TestClient,
    technician_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    response = client.post(
        "/api/v1/invoice-details",
        json={
            "invoice_id": str(billing_records["invoice"]),
            "service_id": str(billing_records["cleaning"]),
            "quantity": 1,
        },
        headers=technician_headers,
    )

    assert response.status_code == 403


def test_delete_invoice_soft_deletes_details(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    invoice_id = billing_records["invoice"]
    detail = _add_detail(client, admin_headers, invoice_id, billing_records["cleaning"], 1)

    response = client.delete(f"/api/v1/invoices/{invoice_id}", headers=admin_headers)
    assert response.status_code == 200

    assert client.get(f"/api/v1/invoices/{invoice_id}", headers=admin_headers).status_code == 404
    with session_scope() as session:
        stored = session.get(InvoiceDetail, uuid.UUID(detail["id"]))
        assert stored.deleted_at is not None


def test_search_invoices_by_status(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    invoice_id = billing_records["invoice"]
    client.put(f"/api/v1/invoices/{invoice_id}", json={"status": "Paid"}, headers=admin_headers)

    paid = client.get(
        "/api/v1/invoices/search", params={"status": "Paid"}, headers=admin_headers
    ).json()
    unpaid = client.get(
        "/api/v1/invoices/search", params={"status": "Unpaid"}, headers=admin_headers
    ).json()

    assert [entry["id"] for entry in paid["data"]] == [str(invoice_id)]
    assert unpaid["pagination"]["total"] == 0


def test_detail_quantity_has_upper_bound(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    response = client.post(
        "/api/v1/invoice-details",
        json={
            "invoice_id": str(billing_records["invoice"]),
            "service_id": str(billing_records["cleaning"]),
            "quantity": 2**31,
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"][0]["field"] == "quantity"


def test_detail_subtotal_beyond_amount_column_is_rejected(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    response = client.post(
        "/api/v1/invoice-details",
        json={
            "invoice_id": str(billing_records["invoice"]),
            "service_id": str(billing_records["cleaning"]),
            "quantity": 10_000,
            "unit_price": "9999999999.99",
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("Subtotal must not exceed")

    invoice = client.get(
        f"/api/v1/invoices/{billing_records['invoice']}", headers=admin_headers
    ).json()["data"]
    assert invoice["details"] == []
    assert Decimal(invoice["total_amount"]) == Decimal("0")


def test_list_invoice_details_is_paginated(
    client: TestClient,
    admin_headers: dict[str, str],
    technician_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    invoice_id = billing_records["invoice"]
    _add_detail(client, admin_headers, invoice_id, billing_records["cleaning"], 1)
    _add_detail(client, admin_headers, invoice_id, billing_records["freon"], 2)

    response = client.get(
        "/api/v1/invoice-details", params={"page": 1, "limit": 1}, headers=technician_headers
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["message"] == "Invoice details retrieved successfully"
    assert len(body["data"]) == 1
    assert body["pagination"]["total"] == 2
    assert body["pagination"]["limit"] == 1


def test_search_invoice_details_by_service(
    client: TestClient,
    admin_headers: dict[str, str],
    billing_records: dict[str, uuid.UUID],
) -> None:
    invoice_id = billing_records["invoice"]
    _add_detail(client, admin_headers, invoice_id, billing_records["cleaning"], 1)
    freon = _add_detail(client, admin_headers, invoice_id, billing_records["freon"], 2)

    response = client.get(
        "/api/v1/invoice-details/search",
        params={"invoice_id": str(invoice_id), "service_id": str(billing_records["freon"])},
        headers=admin_headers,
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert [item["id"] for item in body["data"]] == [freon["id"]]
    assert body["pagination"]["total"] == 1

    other_invoice = client.get(
        "/api/v1/invoice-details/search",
        params={"invoice_id": str(uuid.uuid4())},
        headers=admin_headers,
    )
    assert other_invoice.json()["data"] == []


def test_customer_cannot_list_invoice_details(
    client: TestClient, customer_headers: dict[str, str]
) -> None:
    response = client.get("/api/v1/invoice-details", headers=customer_headers)

    assert response.status_code == 403
