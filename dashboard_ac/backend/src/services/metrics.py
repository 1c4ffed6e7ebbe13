"""Prometheus metric definitions for authentication and billing."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

login_attempts_total = Counter(
    "login_attempts_total",
    "Total login attempts by outcome.",
    labelnames=["outcome"],
)

token_refreshes_total = Counter(
    "token_refreshes_total",
    "Total refresh token exchanges by outcome.",
    labelnames=["outcome"],
)

invoice_reconcile_seconds = Histogram(
    "invoice_reconcile_seconds",
    "Time spent recomputing a single invoice total.",
)

__all__ = [
    "invoice_reconcile_seconds",
    "login_attempts_total",
    "token_refreshes_total",
]
