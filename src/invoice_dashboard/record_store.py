"""
Record store: loads a named JSON document as a list of records.

Every call re-reads and re-parses the document. When a DiskCache is
supplied, parsed documents are cached under a key built from the resolved
path, its modification time and its size, so editing the file always
invalidates the cached copy.
"""

import json
from pathlib import Path
from typing import Any, List

from invoice_dashboard.errors import ParseError, ReadError
from invoice_dashboard.lib import caches, logs, objects

LOG = logs.logger(__file__)


class RecordStore:
    """
    Reads JSON documents whose root is a list of records.

    Attributes:
        cache: Optional disk cache for parsed documents.
    """

    def __init__(self, cache: caches.DiskCache | None = None) -> None:
        self.cache = cache

    def load(self, path: str | Path) -> List[Any]:
        """
        Load the document at ``path`` and return its records verbatim.

        Raises:
            ReadError: The document cannot be read.
            ParseError: The content is not JSON or its root is not a list.
        """
        path = Path(path)
        if self.cache is None:
            return _read_records(path)

        try:
            stat = path.stat()
        except OSError as exc:
            raise ReadError(f"Cannot read {path}: {exc}") from exc
        key = objects.hash(
            [str(path.resolve()), stat.st_mtime_ns, stat.st_size]
        ).hexdigest()
        entry = self.cache.get_or_load(key, lambda: _read_records(path))
        LOG.debug("load - path:%s cache_hit:%s", path, entry.hit)
        return entry.value


def load(path: str | Path) -> List[Any]:
    """Load the document at ``path`` without caching."""
    return _read_records(Path(path))


def _read_records(path: Path) -> List[Any]:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ReadError(f"Cannot read {path}: {exc}") from exc

    try:
        records = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed JSON in {path}: {exc}") from exc

    if not isinstance(records, list):
        raise ParseError(
            f"Expected a list of records in {path}, got {type(records).__name__}"
        )
    LOG.debug("load - path:%s records:%d", path, len(records))
    return records


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ParseError(f"Non-finite number {name} is not valid JSON")
