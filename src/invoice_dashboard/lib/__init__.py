"""
Support modules shared across the invoice dashboard.

Modules:
    logs: Logging utilities
    objects: Object hashing and serialization
    paths: Data and cache directory resolution
    caches: Disk-based caching for parsed documents
"""

from invoice_dashboard.lib import caches, logs, objects, paths

__all__ = ["caches", "logs", "objects", "paths"]
