"""Prometheus metrics for the Monnify gateway client.

Metrics:
- monnify_gateway_requests_total: Gateway calls by method, auth mode and outcome
- monnify_gateway_request_latency_seconds: Gateway call latency
- monnify_login_total: Login attempts by outcome
- monnify_login_latency_seconds: Login call latency
- monnify_token_cache_total: Bearer token lookups by result
- monnify_notification_verifications_total: Webhook verifications by result
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Gateway Requests
# =============================================================================

gateway_requests_total = Counter(
    "monnify_gateway_requests_total",
    "Total number of gateway requests",
    ["method", "auth_mode", "outcome"],  # succeeded, transport_error, gateway_error
)

gateway_request_latency = Histogram(
    "monnify_gateway_request_latency_seconds",
    "Gateway request latency in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


# =============================================================================
# Authentication
# =============================================================================

login_total = Counter(
    "monnify_login_total",
    "Total number of login calls",
    ["outcome"],  # success, failure
)

login_latency = Histogram(
    "monnify_login_latency_seconds",
    "Login call latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

token_cache_total = Counter(
    "monnify_token_cache_total",
    "Bearer token lookups",
    ["result"],  # hit, miss, coalesced, disabled
)


# =============================================================================
# Notifications
# =============================================================================

notification_verifications_total = Counter(
    "monnify_notification_verifications_total",
    "Inbound notification signature checks",
    ["result"],  # accepted, rejected
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_request_latency(method: str) -> Generator[None, None, None]:
    """Context manager to track gateway request latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        gateway_request_latency.labels(method=method).observe(duration)


@contextmanager
def track_login_latency() -> Generator[None, None, None]:
    """Context manager to track login latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        login_latency.observe(duration)


def record_request(method: str, auth_mode: str, outcome: str) -> None:
    """Record the outcome of a gateway request."""
    gateway_requests_total.labels(
        method=method, auth_mode=auth_mode, outcome=outcome
    ).inc()


def record_login_success() -> None:
    login_total.labels(outcome="success").inc()


def record_login_failure() -> None:
    login_total.labels(outcome="failure").inc()


def record_token_lookup(result: str) -> None:
    """Record a bearer token cache lookup."""
    token_cache_total.labels(result=result).inc()


def record_notification_verification(accepted: bool) -> None:
    result = "accepted" if accepted else "rejected"
    notification_verifications_total.labels(result=result).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
