# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

from forum.shared.config import load_config

_config = load_config()

REQUEST_LATENCY = Histogram(
    "forum_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "forum_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
LOGIN_COUNTER = Counter(
    "forum_logins_total",
    "Login attempts by outcome",
    labelnames=("outcome",),
)
SESSIONS_SWEPT = Counter("forum_sessions_swept_total", "Expired sessions removed by the sweeper")
ONLINE_USERS = Gauge("forum_online_users", "Users online at the last presence query")


def metrics_enabled() -> bool:
    return _config.observability.metrics_enabled


def observe_request(endpoint: str, status: int, duration: float) -> None:
    if not metrics_enabled():
        return
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration)
    REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()


def record_login(outcome: str) -> None:
    if metrics_enabled():
        LOGIN_COUNTER.labels(outcome=outcome).inc()


def record_sweep(removed: int) -> None:
    if metrics_enabled() and removed:
        SESSIONS_SWEPT.inc(removed)


def record_online(count: int) -> None:
    if metrics_enabled():
        ONLINE_USERS.set(count)


def render_latest() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "LOGIN_COUNTER",
    "ONLINE_USERS",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "SESSIONS_SWEPT",
    "metrics_enabled",
    "observe_request",
    "record_login",
    "record_online",
    "record_sweep",
    "render_latest",
]
