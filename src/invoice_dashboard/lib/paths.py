"""
Path utilities for the invoice dashboard.

Resolves the directory holding the JSON documents and the optional
cache directory from the environment.
"""

import os
from pathlib import Path

_PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def data_dir() -> Path:
    """
    Return the directory containing the dashboard JSON documents.

    Uses DASHBOARD_DATA_DIR when set, otherwise the packaged fixtures.
    """
    configured = os.getenv("DASHBOARD_DATA_DIR", None)
    return Path(configured) if configured else _PACKAGE_DATA_DIR


def cache_dir() -> Path | None:
    """Return the record cache directory, or None when caching is disabled."""
    configured = os.getenv("DASHBOARD_CACHE_DIR", None)
    return Path(configured) if configured else None
