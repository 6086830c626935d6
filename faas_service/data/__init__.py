"""Document storage package."""

from faas_service.data.store import DataStore, StoredRecord, StorePage

__all__ = ["DataStore", "StorePage", "StoredRecord"]
