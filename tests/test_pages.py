"""Tests for the page-level table helpers and HTML snippets."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from analytics.categorisation import expenses_frame
from app.layout import navbar_markup
from app.pages.expenses import filter_expenses
from app.pages.invoices import filter_invoices, invoice_table
from app.pages.overview import insight_markup
from core.models import Insight
from core.summary_service import prepare_dashboard_data
from data.demo import DEMO_BUSINESS, demo_customer_names, demo_expenses, demo_invoices

TODAY = date(2024, 6, 20)


@pytest.fixture()
def demo_data():
    return prepare_dashboard_data(
        demo_invoices(TODAY),
        demo_expenses(TODAY),
        DEMO_BUSINESS,
        today=TODAY,
        customers=demo_customer_names(),
    )


def test_invoice_table_shows_customer_names(demo_data):
    table = invoice_table(demo_data)

    assert table.set_index("Number")["Customer"].to_dict() == {
        "INV-1001": "Acme Corp",
        "INV-1002": "Globex Inc",
    }


def test_invoice_table_falls_back_to_customer_id(demo_data):
    demo_data["customers"] = {}

    table = invoice_table(demo_data)

    assert sorted(table["Customer"]) == ["cust-1", "cust-2"]


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("", ["INV-1001", "INV-1002"]),
        ("  ", ["INV-1001", "INV-1002"]),
        ("globex", ["INV-1002"]),
        ("inv-1001", ["INV-1001"]),
        ("corp", ["INV-1001"]),
        ("initech", []),
    ],
)
def test_filter_invoices_by_number_or_customer(demo_data, query, expected):
    filtered = filter_invoices(invoice_table(demo_data), query)

    assert sorted(filtered["Number"]) == expected


@pytest.mark.parametrize(
    ("query", "category", "expected"),
    [
        (None, None, ["Client Lunch", "Hosting", "Office Supplies"]),
        ("office", None, ["Office Supplies"]),
        ("SOFT", None, ["Hosting"]),
        ("lunch", "All", ["Client Lunch"]),
        ("", "Meals", ["Client Lunch"]),
        ("hosting", "Meals", []),
    ],
)
def test_filter_expenses_by_text_and_category(demo_data, query, category, expected):
    frame = expenses_frame(demo_data["expenses"])

    filtered = filter_expenses(frame, query, category)

    assert sorted(filtered["description"]) == expected


def test_filter_expenses_on_empty_frame():
    assert filter_expenses(expenses_frame([]), "rent").empty


def test_insight_markup_escapes_message():
    insight = Insight(
        type="suggestion",
        message="Your highest expense is R&D <Contractors> (60% of total).",
        action="View Expenses",
    )

    markup = insight_markup(insight)

    assert "R&amp;D &lt;Contractors&gt;" in markup
    assert "<Contractors>" not in markup
    assert "--accent:#3B82F6" in markup


def test_navbar_markup_escapes_business_name():
    markup = navbar_markup("invoices", "Oak & <Ash>")

    assert "Ledgerly · Oak &amp; &lt;Ash&gt;" in markup
    assert 'href="?page=invoices" aria-current="page"' in markup
    assert '<span class="lg-nav__link is-disabled">Customers</span>' in markup
