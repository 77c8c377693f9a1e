"""
Data models for the invoice dashboard.

This package provides:
- Record models parsed from the JSON documents (Invoice, Customer, User)
- View models returned by the query layer (LatestInvoice, CardData, ...)
"""

from invoice_dashboard.models.records import Customer, Invoice, User
from invoice_dashboard.models.views import (
    CardData,
    CustomersTableRow,
    CustomerTotals,
    InvoiceEntry,
    InvoiceForm,
    InvoicesTableRow,
    LatestInvoice,
)

__all__ = [
    "CardData",
    "Customer",
    "CustomerTotals",
    "CustomersTableRow",
    "Invoice",
    "InvoiceEntry",
    "InvoiceForm",
    "InvoicesTableRow",
    "LatestInvoice",
    "User",
]
