"""
Utility functions for invoice data formatting and filtering.

Provides helpers for:
- Currency formatting of amounts stored in cents
- Unit conversion from cents to major units
- Case-sensitive substring matching of table rows against a query
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_dashboard.models.views import InvoicesTableRow

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
}


def format_currency(amount: int | float | Decimal | None, currency: str = "USD") -> str:
    """
    Format an amount in cents as a major-unit currency string.

    Fractional cents are rounded half-up to whole cents. Negative amounts
    keep a leading minus sign before the symbol, and None renders as zero.
    NaN and infinite amounts render as the N/A label.

    Args:
        amount: Amount in minor units (cents).
        currency: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Formatted string like '$1,234.56' or '-$0.50'.
    """
    value = Decimal(str(amount or 0))
    if not value.is_finite():
        return "N/A"
    cents = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    major = cents / 100
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if major < 0 else ""
    return f"{sign}{symbol}{abs(major):,.2f}"


def to_major_units(amount: int | float) -> float:
    """Convert an amount in cents to major units (dollars)."""
    return amount / 100


def matches_query(row: "InvoicesTableRow", query: str | None) -> bool:
    """
    Check if an invoice table row matches the search query.

    Matching is a case-sensitive substring test against the row's
    searchable terms. An empty or missing query matches every row.
    """
    if not query:
        return True
    return any(query in value for value in row.searchable_terms())
