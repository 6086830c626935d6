"""Service layer composing the document store with request accounting."""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Any

from faas_service.config import Settings
from faas_service.data.schemas import DataItem, DataListing
from faas_service.data.store import DataStore, StoredRecord
from faas_service.lib.logger import get_logger
from faas_service.lib.metrics import MetricsRegistry, RequestCounter
from faas_service.system.schemas import (
    EchoResponse,
    HealthReport,
    MetricsReport,
    MetricsSnapshot,
    ServiceInfo,
)

IDENTITY = "FAAS Service Running on L1NE Infrastructure"

logger = get_logger(__name__)


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()


def format_uptime(seconds: float) -> str:
    """Render an uptime in seconds as ``<d>d <h>h <m>m``."""

    minutes_total = max(int(seconds), 0) // 60
    days, remainder = divmod(minutes_total, 24 * 60)
    hours, minutes = divmod(remainder, 60)
    return f"{days}d {hours}h {minutes}m"


class DataService:
    """Operations invoked by the HTTP routers.

    Every public operation counts as exactly one request. ``status`` and
    ``metrics`` report the number of requests handled before the current call.
    """

    def __init__(
        self,
        *,
        service_name: str = "faas-service",
        version: str = "1.0.0",
        instance_id: str = "0",
        port: int = 8080,
        default_page_limit: int = 10,
        max_page_limit: int | None = None,
        store: DataStore | None = None,
        counter: RequestCounter | None = None,
    ) -> None:
        self.service_name = service_name
        self.version = version
        self.instance_id = instance_id
        self.port = port
        self.default_page_limit = default_page_limit
        self.max_page_limit = max_page_limit
        self._store = store if store is not None else DataStore()
        self._requests = counter if counter is not None else RequestCounter()
        self._operations = MetricsRegistry()
        self._started = time.monotonic()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataService":
        return cls(
            service_name=settings.service_name,
            version=settings.version,
            instance_id=settings.instance_id,
            port=settings.port,
            default_page_limit=settings.default_page_limit,
            max_page_limit=settings.max_page_limit,
        )

    @property
    def request_count(self) -> int:
        """Current request total, read without counting a request."""

        return self._requests.snapshot()

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started

    def _count(self, operation: str) -> int:
        self._operations.increment(operation)
        return self._requests.increment()

    def health(self) -> HealthReport:
        self._count("health")
        return HealthReport(timestamp=_now())

    def status(self) -> ServiceInfo:
        total = self._count("status")
        return ServiceInfo(
            service=self.service_name,
            version=self.version,
            instance_id=self.instance_id,
            port=self.port,
            uptime=format_uptime(self.uptime_seconds),
            request_count=total - 1,
        )

    def list_data(self, offset: int = 0, limit: int | None = None) -> DataListing:
        """Return a page of stored documents.

        ``offset`` and ``limit`` are validated by the caller; ``limit`` falls
        back to the configured default and is clamped only when a maximum is
        configured.
        """

        self._count("list_data")
        if limit is None:
            limit = self.default_page_limit
        if self.max_page_limit is not None:
            limit = min(limit, self.max_page_limit)

        page = self._store.list(offset=offset, limit=limit)
        return DataListing(
            data=[DataItem.from_record(record) for record in page.items],
            total=page.total,
            limit=limit,
            offset=offset,
        )

    def put_data(self, value: Any) -> str:
        self._count("put_data")
        key = self._store.put(value)
        logger.info("data_stored", extra={"key": key, "instance_id": self.instance_id})
        return key

    def get_by_key(self, key: str) -> StoredRecord | None:
        self._count("get_data")
        record = self._store.get(key)
        if record is None:
            logger.debug("data_missing", extra={"key": key, "operation": "get"})
        return record

    def delete_by_key(self, key: str) -> bool:
        self._count("delete_data")
        removed = self._store.delete(key)
        if removed:
            logger.info("data_deleted", extra={"key": key, "instance_id": self.instance_id})
        else:
            logger.debug("data_missing", extra={"key": key, "operation": "delete"})
        return removed

    def metrics(self) -> MetricsReport:
        total = self._count("metrics")
        snapshot = MetricsSnapshot(
            request_count=total - 1,
            stored_items=len(self._store),
            operations=self._operations.snapshot(),
        )
        return MetricsReport(metrics=snapshot, timestamp=_now())

    def echo(self, value: Any) -> EchoResponse:
        self._count("echo")
        return EchoResponse(echo=value, timestamp=_now(), instance=self.instance_id)
