"""
Service factory for the invoice dashboard.

This module provides get_dashboard_service(), which returns a
DashboardService over the configured DataStore implementation.

Available stores:
- json: Flat JSON documents (packaged fixtures or DASHBOARD_DATA_DIR)
- sql: SQLModel tables on DASHBOARD_DATABASE_URL, seeded from the JSON
  documents when empty

The service is cached at the module level, so the same instance is reused
across requests. Configure via the DASHBOARD_STORE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_dashboard.lib import logs
from invoice_dashboard.services.dashboard_service import (
    ITEMS_PER_PAGE,
    DashboardService,
)
from invoice_dashboard.services.data_store import DataStore
from invoice_dashboard.services.data_store_json import JsonDataStore
from invoice_dashboard.services.data_store_sql import SqlDataStore

LOG = logs.logger(__file__)


def _seeded_sql_store() -> SqlDataStore:
    store = SqlDataStore()
    store.seed(JsonDataStore())
    return store


_STORE_REGISTRY: Dict[str, Callable[[], DataStore]] = {
    "json": lambda: JsonDataStore(),
    "sql": _seeded_sql_store,
}


@cache
def get_dashboard_service(kind: str | None = None) -> DashboardService:
    """Return a DashboardService over the configured data store."""
    resolved_kind = (kind or os.getenv("DASHBOARD_STORE", "json")).lower()
    LOG.info("get_dashboard_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown data store kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return DashboardService(factory())


__all__ = [
    "ITEMS_PER_PAGE",
    "DashboardService",
    "DataStore",
    "JsonDataStore",
    "SqlDataStore",
    "get_dashboard_service",
]
