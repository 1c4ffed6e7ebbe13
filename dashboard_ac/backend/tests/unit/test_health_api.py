"""Tests for health and metrics endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_liveness_endpoint(client: TestClient) -> None:
    response = client.get("/api/health/live")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["message"] == "Server is healthy"
    assert body["data"]["status"] == "healthy"
    assert body["data"]["service"] == "dashboard-ac-backend"
    assert body["data"]["version"]
    assert body["data"]["timestamp"]


def test_readiness_endpoint_checks_database(client: TestClient) -> None:
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["message"] == "Server is ready"
    assert body["data"]["status"] == "ready"


def test_metrics_endpoint_exposes_prometheus_format(client: TestClient) -> None:
    response = client.get("/api/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/api/v1/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"status": "error", "message": "Not Found"}
