"""Schemas for health, status, metrics and echo responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthChecks(BaseModel):
    database: str = "ok"
    memory: str = "ok"
    disk: str = "ok"


class HealthReport(BaseModel):
    """Liveness payload; the in-memory service has no external dependencies to check."""

    status: str = "healthy"
    timestamp: str
    checks: HealthChecks = Field(default_factory=HealthChecks)


class ServiceInfo(BaseModel):
    """Snapshot of service identity and runtime counters."""

    service: str
    version: str
    instance_id: str
    port: int
    uptime: str
    request_count: int


class MetricsSnapshot(BaseModel):
    request_count: int
    stored_items: int
    operations: dict[str, int] = Field(default_factory=dict)


class MetricsReport(BaseModel):
    metrics: MetricsSnapshot
    timestamp: str


class EchoResponse(BaseModel):
    echo: Any = None
    timestamp: str
    instance: str
