"""
Flat-file implementation of DataStore backed by JSON documents.

Each listing reads its document through the record store on every call,
so callers that need several views of the same data within one request
should fetch once and reuse the result.
"""

from pathlib import Path
from typing import Any, Dict, List

from invoice_dashboard.lib import caches, logs, paths
from invoice_dashboard.models.records import Customer, Invoice, User
from invoice_dashboard.record_store import RecordStore
from invoice_dashboard.services.data_store import DataStore

LOG = logs.logger(__file__)

REVENUE_DOCUMENT = "revenue.json"
INVOICES_DOCUMENT = "invoices.json"
CUSTOMERS_DOCUMENT = "customers.json"
USERS_DOCUMENT = "users.json"


class JsonDataStore(DataStore):
    """
    DataStore reading ``revenue.json``, ``invoices.json``,
    ``customers.json`` and ``users.json`` from a directory.

    Attributes:
        data_dir: Directory holding the documents.
    """

    def __init__(
        self,
        data_dir: str | Path | None = None,
        record_store: RecordStore | None = None,
    ) -> None:
        """
        Initialize with a document directory.

        Args:
            data_dir: Document directory, or None for DASHBOARD_DATA_DIR
                      (falling back to the packaged fixtures).
            record_store: Record store to read through, or None to build one
                          (cached when DASHBOARD_CACHE_DIR is set).
        """
        self.data_dir = Path(data_dir) if data_dir else paths.data_dir()
        if record_store is None:
            cache_dir = paths.cache_dir()
            record_store = RecordStore(caches.DiskCache(cache_dir) if cache_dir else None)
        self._records = record_store
        LOG.info("JsonDataStore - data_dir:%s cached:%s", self.data_dir, record_store.cache is not None)

    def revenue(self) -> List[Dict[str, Any]]:
        return self._load(REVENUE_DOCUMENT)

    def invoices(self) -> List[Invoice]:
        return [Invoice.from_record(raw) for raw in self._load(INVOICES_DOCUMENT)]

    def customers(self) -> List[Customer]:
        return [Customer.from_record(raw) for raw in self._load(CUSTOMERS_DOCUMENT)]

    def users(self) -> List[User]:
        return [User.from_record(raw) for raw in self._load(USERS_DOCUMENT)]

    def _load(self, name: str) -> List[Any]:
        return self._records.load(self.data_dir / name)
