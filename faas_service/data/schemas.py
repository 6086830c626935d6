"""Pydantic schemas for data endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from faas_service.data.store import StoredRecord


class DataItem(BaseModel):
    """A stored document together with its key."""

    key: str
    value: Any = None

    @classmethod
    def from_record(cls, record: StoredRecord) -> "DataItem":
        return cls(key=record.key, value=record.value)


class DataListing(BaseModel):
    """Paginated listing of stored documents."""

    data: list[DataItem] = Field(default_factory=list)
    total: int
    limit: int
    offset: int


class DataCreated(BaseModel):
    """Response payload for a stored document."""

    message: str = "Data stored successfully"
    key: str
