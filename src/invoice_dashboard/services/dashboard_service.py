"""
Query layer answering the dashboard's read requests over a DataStore.

Every public method is a boundary: any failure underneath is logged and
re-raised as a DataAccessError with a fixed message (see errors.data_access).

Invoice ordering:
    fetch_invoices() sorts by the ISO date string, newest first, with a
    stable sort so equal dates keep document order. Each entry's ``id`` is
    its 0-based position in that order; the stored key is kept separately
    in ``invoice_id`` and never overwritten.

Orphan invoices:
    An invoice whose customer_id matches no customer aborts the request
    with NotFoundError (surfacing as DataAccessError).
"""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Sequence

from invoice_dashboard.errors import NotFoundError, data_access
from invoice_dashboard.lib import logs, objects
from invoice_dashboard.models.records import Customer, User
from invoice_dashboard.models.views import (
    CardData,
    CustomersTableRow,
    InvoiceEntry,
    InvoiceForm,
    InvoicesTableRow,
    LatestInvoice,
)
from invoice_dashboard.services.data_store import DataStore
from invoice_dashboard.utils import format_currency, matches_query, to_major_units

LOG = logs.logger(__file__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


class DashboardService:
    """
    Read-only queries for the dashboard widgets.

    Attributes:
        store: The DataStore every query reads from.
    """

    def __init__(self, store: DataStore) -> None:
        self.store = store

    @data_access("Failed to fetch revenue data.")
    def fetch_revenue(self) -> List[Dict[str, Any]]:
        """Return the revenue series exactly as stored."""
        return self.store.revenue()

    @data_access("Failed to fetch invoices.")
    def fetch_invoices(self) -> List[InvoiceEntry]:
        """Return all invoices newest first, tagged with their position."""
        ordered = sorted(self.store.invoices(), key=lambda invoice: invoice.date, reverse=True)
        return [
            InvoiceEntry(
                id=index,
                invoice_id=invoice.id,
                customer_id=invoice.customer_id,
                amount=invoice.amount,
                date=invoice.date,
                status=invoice.status,
            )
            for index, invoice in enumerate(ordered)
        ]

    @data_access("Failed to fetch customers.")
    def fetch_customers(self) -> List[Customer]:
        """Return all customers in document order."""
        return self.store.customers()

    @data_access("Failed to fetch the latest invoices.")
    def fetch_latest_invoices(self) -> List[LatestInvoice]:
        """Return the five newest invoices joined with their customers."""
        latest = self.fetch_invoices()[:LATEST_INVOICES_LIMIT]
        if not latest:
            return []
        by_id = _index_customers(self.store.customers())
        result = []
        for entry in latest:
            customer = _customer_for(by_id, entry)
            result.append(
                LatestInvoice(
                    id=entry.id,
                    name=customer.name,
                    email=customer.email,
                    image_url=customer.image_url,
                    amount=format_currency(entry.amount),
                )
            )
        return result

    @data_access("Failed to fetch card data.")
    def fetch_card_data(self) -> CardData:
        """
        Return invoice and customer counts plus paid and pending totals.

        Invoices and customers are loaded concurrently; if either load
        fails the whole call fails.
        """
        with ThreadPoolExecutor(max_workers=2) as pool:
            invoices_future = pool.submit(self.store.invoices)
            customers_future = pool.submit(self.store.customers)
            invoices = invoices_future.result()
            customers = customers_future.result()

        total_paid = sum(invoice.amount for invoice in invoices if invoice.status == "paid")
        total_pending = sum(
            invoice.amount for invoice in invoices if invoice.status == "pending"
        )
        card = CardData(
            number_of_invoices=len(invoices),
            number_of_customers=len(customers),
            total_paid_invoices=format_currency(total_paid),
            total_pending_invoices=format_currency(total_pending),
        )
        LOG.debug("fetch_card_data - %s", objects.to_json(card))
        return card

    @data_access("Failed to fetch invoices.")
    def fetch_filtered_invoices_unpaginated(self, query: str | None) -> List[InvoicesTableRow]:
        """
        Return every invoice table row matching ``query``, newest first.

        A row matches when its customer name, email, amount (in cents, as a
        decimal string), date or status contains the query. Matching is
        case-sensitive.
        """
        entries = self.fetch_invoices()
        by_id = _index_customers(self.store.customers())
        rows = []
        for entry in entries:
            customer = _customer_for(by_id, entry)
            rows.append(
                InvoicesTableRow(
                    id=str(entry.id),
                    customer_id=customer.id,
                    name=customer.name,
                    email=customer.email,
                    image_url=customer.image_url,
                    date=entry.date,
                    amount=entry.amount,
                    status=entry.status,
                )
            )
        return [row for row in rows if matches_query(row, query)]

    @data_access("Failed to fetch invoices.")
    def fetch_filtered_invoices(self, query: str | None, page: int = 1) -> List[InvoicesTableRow]:
        """
        Return one page (1-indexed) of the filtered invoice table.

        Pages outside 1..fetch_invoices_pages(query) are empty, as are
        pages that are not whole numbers.
        """
        page_number = _as_position(page)
        if page_number is None or page_number < 1:
            return []
        offset = (page_number - 1) * ITEMS_PER_PAGE
        rows = self.fetch_filtered_invoices_unpaginated(query)
        return rows[offset : offset + ITEMS_PER_PAGE]

    @data_access("Failed to fetch total number of invoices.")
    def fetch_invoices_pages(self, query: str | None) -> int:
        """Return the number of pages the filtered invoice table spans."""
        rows = self.fetch_filtered_invoices_unpaginated(query)
        return math.ceil(len(rows) / ITEMS_PER_PAGE)

    @data_access("Failed to fetch invoice.")
    def fetch_invoice_by_id(self, id: int | str) -> InvoiceForm | None:
        """
        Return the invoice at position ``id`` in fetch_invoices() order.

        ``id`` is the ordinal from fetch_invoices(), not the stored key. The
        amount is converted to major units. Numeric strings are accepted
        ("1", "1.0"); ids that are not whole non-negative numbers or fall
        past the end return None.
        """
        position = _as_position(id)
        entries = self.fetch_invoices()
        if position is None or not 0 <= position < len(entries):
            return None
        entry = entries[position]
        return InvoiceForm(
            id=entry.id,
            invoice_id=entry.invoice_id,
            customer_id=entry.customer_id,
            amount=to_major_units(entry.amount),
            date=entry.date,
            status=entry.status,
        )

    @data_access("Failed to fetch customer table.")
    def fetch_filtered_customers(self, query: str | None) -> List[CustomersTableRow]:
        """
        Return customers matching ``query`` with their invoice totals.

        Name and email are matched case-insensitively; results are ordered
        by name and totals are formatted as currency.
        """
        return [
            CustomersTableRow(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                total_invoices=row.total_invoices,
                total_pending=format_currency(row.total_pending),
                total_paid=format_currency(row.total_paid),
            )
            for row in self.store.filtered_customers(query)
        ]

    @data_access("Failed to fetch user.")
    def get_user(self, email: str) -> User | None:
        """Return the user with exactly this email, or None."""
        user = self.store.find_user(email)
        LOG.info("get_user - email:%s found:%s", email, user is not None)
        return user


def _index_customers(customers: Sequence[Customer]) -> Dict[str, Customer]:
    by_id: Dict[str, Customer] = {}
    for customer in customers:
        by_id.setdefault(customer.id, customer)
    return by_id


def _customer_for(by_id: Dict[str, Customer], entry: InvoiceEntry) -> Customer:
    try:
        return by_id[entry.customer_id]
    except KeyError as exc:
        msg = f"No customer {entry.customer_id} for invoice at position {entry.id}"
        raise NotFoundError(msg) from exc


def _as_position(value: Any) -> int | None:
    """Coerce an id or page number to an int; None unless it is a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)
