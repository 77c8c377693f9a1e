"""
Object utilities for hashing and JSON serialization.

Provides convenience functions for creating stable hashes of objects
and serializing view objects to JSON for logging.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from typing import Any


class HashResult:
    """Wrapper around a sha256 digest exposing hexdigest()."""

    def __init__(self, data: bytes) -> None:
        self._hash = hashlib.sha256(data)

    def hexdigest(self) -> str:
        """Return the hexadecimal digest of the hash."""
        return self._hash.hexdigest()


def hash(obj: Any) -> HashResult:
    """
    Create a stable hash of an object or list of objects.

    Objects are serialized to JSON with sorted keys before hashing so
    results are consistent across Python sessions.

    Args:
        obj: Any JSON-serializable object or list of objects.

    Returns:
        HashResult instance with hexdigest() method.
    """
    json_str = json.dumps(obj, sort_keys=True, default=str)
    return HashResult(json_str.encode("utf-8"))


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string.

    Dataclasses (and lists of them) are converted to dictionaries first.
    Falls back to str() for anything else that is not serializable.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent)


def _default_serializer(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
