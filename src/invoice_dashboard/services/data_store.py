"""
Abstract base class defining the dashboard storage contract.

Every backend answers the same capability set: plain listings of the four
documents, a user lookup by email, and the filtered customer aggregate.
The lookup and the aggregate have in-memory default implementations built
on the listings; backends that can push them down (SQL) override them.

Implementations:
- JsonDataStore: flat JSON documents read through the record store
- SqlDataStore: SQLModel tables on any SQLAlchemy engine
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from invoice_dashboard.models.records import Customer, Invoice, User
from invoice_dashboard.models.views import CustomerTotals


class DataStore(ABC):
    """
    Abstract base class for dashboard data access.

    Subclasses must provide the four listings. Listings return records in
    document (insertion) order.
    """

    @abstractmethod
    def revenue(self) -> List[Dict[str, Any]]:
        """Return the revenue series as raw records."""

    @abstractmethod
    def invoices(self) -> List[Invoice]:
        """Return all invoices in document order."""

    @abstractmethod
    def customers(self) -> List[Customer]:
        """Return all customers in document order."""

    @abstractmethod
    def users(self) -> List[User]:
        """Return all users in document order."""

    def find_user(self, email: str) -> User | None:
        """
        Return the first user whose email equals ``email`` exactly.

        Returns None when no user matches; that is not an error.
        """
        return next((user for user in self.users() if user.email == email), None)

    def filtered_customers(self, query: str | None) -> List[CustomerTotals]:
        """
        Aggregate invoice totals for customers matching ``query``.

        Customers whose name or email contains the query (case-insensitive)
        are left-joined to their invoices and grouped; pending and paid
        amounts are summed separately. Customers without invoices report
        zero totals. Results are ordered by name ascending, then customer id.
        """
        return aggregate_customers(self.customers(), self.invoices(), query)


def aggregate_customers(
    customers: Sequence[Customer],
    invoices: Sequence[Invoice],
    query: str | None,
) -> List[CustomerTotals]:
    """In-memory GROUP BY over customers with conditional status sums."""
    needle = (query or "").lower()
    totals: Dict[str, CustomerTotals] = {}
    for customer in customers:
        if needle in customer.name.lower() or needle in customer.email.lower():
            totals.setdefault(
                customer.id,
                CustomerTotals(
                    id=customer.id,
                    name=customer.name,
                    email=customer.email,
                    image_url=customer.image_url,
                    total_invoices=0,
                    total_pending=0,
                    total_paid=0,
                ),
            )

    for invoice in invoices:
        row = totals.get(invoice.customer_id)
        if row is None:
            continue
        row.total_invoices += 1
        if invoice.status == "pending":
            row.total_pending += invoice.amount
        elif invoice.status == "paid":
            row.total_paid += invoice.amount

    return sorted(totals.values(), key=lambda row: (row.name, row.id))
