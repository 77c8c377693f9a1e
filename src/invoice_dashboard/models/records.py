"""
Base record models read from the dashboard documents.

These dataclasses mirror the JSON records one to one. The ``from_record``
constructors parse a raw mapping and raise ParseError when a required
field is missing or has the wrong shape; ``to_record`` gives back the
document form so field names round-trip unchanged.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Mapping

from benedict import benedict

from invoice_dashboard.errors import ParseError


def _wrap(raw: Mapping[str, Any], kind: str) -> benedict:
    if not isinstance(raw, Mapping):
        raise ParseError(f"{kind} record must be an object, got {type(raw).__name__}")
    return benedict(dict(raw), keypath_separator=None)


def _required(b: benedict, key: str, kind: str) -> Any:
    value = b.get(key)
    if value is None:
        raise ParseError(f"{kind} record is missing '{key}'")
    return value


@dataclass(slots=True)
class Invoice:
    """An invoice as stored; amount is in cents and id may be absent."""

    customer_id: str
    amount: int
    date: str
    status: str
    id: str | None = None

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "Invoice":
        b = _wrap(raw, "invoice")
        amount = _required(b, "amount", "invoice")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ParseError(f"invoice amount must be numeric, got {amount!r}")
        if not math.isfinite(amount):
            raise ParseError(f"invoice amount must be finite, got {amount!r}")
        record_id = b.get("id")
        return cls(
            customer_id=str(_required(b, "customer_id", "invoice")),
            amount=int(amount) if float(amount).is_integer() else amount,
            date=str(_required(b, "date", "invoice")),
            status=str(_required(b, "status", "invoice")),
            id=str(record_id) if record_id is not None else None,
        )

    def to_record(self) -> dict:
        record = asdict(self)
        if self.id is None:
            del record["id"]
        return record


@dataclass(slots=True)
class Customer:
    """A customer shown alongside invoices."""

    id: str
    name: str
    email: str
    image_url: str = ""

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "Customer":
        b = _wrap(raw, "customer")
        return cls(
            id=str(_required(b, "id", "customer")),
            name=str(_required(b, "name", "customer")),
            email=str(_required(b, "email", "customer")),
            image_url=str(b.get("image_url", "")),
        )

    def to_record(self) -> dict:
        return asdict(self)


@dataclass(slots=True)
class User:
    """A dashboard user; the password is stored in plaintext in this build."""

    email: str
    password: str
    id: str = ""
    name: str = ""

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "User":
        b = _wrap(raw, "user")
        return cls(
            email=str(_required(b, "email", "user")),
            password=str(_required(b, "password", "user")),
            id=str(b.get("id", "")),
            name=str(b.get("name", "")),
        )

    def to_record(self) -> dict:
        return asdict(self)
