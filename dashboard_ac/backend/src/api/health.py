"""Liveness, readiness and Prometheus metrics endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text
from sqlalchemy.orm import Session

from ..db import get_session_dependency
from ..schemas.common import Envelope, envelope

SERVICE_NAME = "dashboard-ac-backend"
SERVICE_VERSION = "0.1.0"

router = APIRouter(tags=["health"])


def _status_payload(status: str) -> dict[str, Any]:
    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/health/live", response_model=Envelope[dict[str, Any]])
def liveness() -> dict[str, object]:
    return envelope("Server is healthy", _status_payload("healthy"))


@router.get("/health/ready", response_model=Envelope[dict[str, Any]])
def readiness(
    session: Annotated[Session, Depends(get_session_dependency)],
) -> dict[str, object]:
    """Report ready once the database answers a trivial query."""

    session.execute(text("SELECT 1"))
    return envelope("Server is ready", _status_payload("ready"))


@router.get("/metrics")
def metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
