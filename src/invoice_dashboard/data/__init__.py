"""
Packaged JSON documents for the invoice dashboard.

Files:
- revenue.json: Monthly revenue series
- invoices.json: Invoices (amounts in cents)
- customers.json: Customers referenced by the invoices
- users.json: Dashboard users
"""
