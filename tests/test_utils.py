from decimal import Decimal

import pytest

from invoice_dashboard.models.views import InvoicesTableRow
from invoice_dashboard.utils import format_currency, matches_query, to_major_units


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "$0.00"),
        (50, "$0.50"),
        (300, "$3.00"),
        (123456, "$1,234.56"),
        (100000000, "$1,000,000.00"),
        (None, "$0.00"),
        (Decimal("1550"), "$15.50"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_negative_keeps_sign_before_symbol():
    assert format_currency(-1234) == "-$12.34"
    assert format_currency(-0.4) == "$0.00"


def test_format_currency_rounds_fractional_cents_half_up():
    assert format_currency(12.5) == "$0.13"
    assert format_currency(12.4) == "$0.12"
    assert format_currency(-12.5) == "-$0.13"


def test_format_currency_other_currencies():
    assert format_currency(100, "EUR") == "€1.00"
    assert format_currency(100, "CHF") == "CHF 1.00"


def test_to_major_units():
    assert to_major_units(1550) == 15.5
    assert to_major_units(0) == 0


def _row(**overrides):
    values = dict(
        id="0",
        customer_id="c1",
        name="Amy Burns",
        email="amy@burns.com",
        image_url="",
        date="2023-01-01",
        amount=1500,
        status="paid",
    )
    values.update(overrides)
    return InvoicesTableRow(**values)


def test_matches_query_is_case_sensitive_substring():
    row = _row()
    assert matches_query(row, "Burns")
    assert matches_query(row, "burns.com")
    assert matches_query(row, "150")
    assert matches_query(row, "01-0")
    assert matches_query(row, "ai")
    assert not matches_query(row, "AMY")
    assert not matches_query(row, "PAID")


def test_matches_query_empty_query_matches_everything():
    assert matches_query(_row(), "")
    assert matches_query(_row(), None)


def test_matches_query_amount_decimal_string():
    assert matches_query(_row(amount=1500), "5")
    assert not matches_query(_row(amount=200, date="2023-01-01"), "5")


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_format_currency_non_finite_is_not_available(amount):
    assert format_currency(amount) == "N/A"
