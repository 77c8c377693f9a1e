"""
Derived view models returned by the query layer.

Each view is a read model shaped for one dashboard widget: the invoice
table, the latest-invoices panel, the summary cards, the customer table
and the invoice edit form. Views expose ``to_dict`` for JSON transport.
"""

from dataclasses import asdict, dataclass
from typing import List


@dataclass(slots=True)
class _View:
    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)


@dataclass(slots=True)
class InvoiceEntry(_View):
    """
    An invoice positioned in date-descending order.

    Attributes:
        id: 0-based ordinal in the sorted sequence.
        invoice_id: The stored invoice key, untouched (None if the document has none).
    """

    id: int
    invoice_id: str | None
    customer_id: str
    amount: int
    date: str
    status: str


@dataclass(slots=True)
class LatestInvoice(_View):
    """Latest invoice joined with its customer, amount already formatted."""

    id: int
    name: str
    email: str
    image_url: str
    amount: str


@dataclass(slots=True)
class InvoicesTableRow(_View):
    """Invoice joined with customer fields, used for searching."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: str
    amount: int
    status: str

    def searchable_terms(self) -> List[str]:
        """Return the terms that should be matched when filtering."""
        return [self.name, self.email, str(self.amount), self.date, self.status]


@dataclass(slots=True)
class InvoiceForm(_View):
    """Invoice prepared for editing; amount is in major units."""

    id: int
    invoice_id: str | None
    customer_id: str
    amount: float
    date: str
    status: str


@dataclass(slots=True)
class CardData(_View):
    """Summary figures for the dashboard cards."""

    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


@dataclass(slots=True)
class CustomerTotals(_View):
    """Per-customer aggregate with totals still in cents."""

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: int
    total_paid: int


@dataclass(slots=True)
class CustomersTableRow(_View):
    """Per-customer aggregate with formatted totals."""

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
