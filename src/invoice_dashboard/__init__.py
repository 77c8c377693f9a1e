"""
Invoice Dashboard: the data layer behind an invoice/customer dashboard.

This package reads revenue, invoice, customer and user records from JSON
documents (or an equivalent SQL database), shapes them into read models
for the dashboard widgets, and authorizes the dashboard's user.

Subpackages:
- models: Record and view dataclasses
- services: DataStore backends and the DashboardService query layer
- lib: Logging, caching, hashing and path helpers
- data: Packaged JSON fixtures

Main entry points:
- services.get_dashboard_service(): The configured query service
- auth.authorize(): Credential check for sign-in
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
