"""Tests for dashboard assembly, CSV loading and the demo/synthetic ledgers."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.data_loader import load_customers, load_expenses, load_invoices
from core.models import BusinessContext
from core.summary_service import load_dashboard_data, prepare_dashboard_data
from core.validation import ValidationError
from data.demo import DEMO_BUSINESS, demo_expenses, demo_invoices
from data.synth import generate_synthetic_ledger, write_ledger_csv

TODAY = date(2024, 6, 20)


@pytest.fixture(autouse=True)
def clear_loader_cache():
    load_invoices.cache_clear()
    load_expenses.cache_clear()
    load_customers.cache_clear()


@pytest.fixture()
def ledger_dir(tmp_path) -> Path:
    pd.DataFrame(
        [
            {"id": "inv-1", "invoice_number": "INV-1", "customer_id": "c1", "status": "Paid", "issue_date": "2024-06-02", "due_date": "2024-06-16", "total_amount": 900.0},
            {"id": "inv-2", "invoice_number": "INV-2", "customer_id": "c2", "status": "sent", "issue_date": "2024-05-11", "due_date": "2024-06-10", "total_amount": 300.0},
        ]
    ).to_csv(tmp_path / "invoices.csv", index=False)
    pd.DataFrame(
        [
            {"id": "exp-1", "date": "2024-06-03", "category": "Software", "description": "Hosting", "amount": 100.0},
            {"id": "exp-2", "date": "2024-06-04", "category": None, "description": None, "amount": 40.0},
        ]
    ).to_csv(tmp_path / "expenses.csv", index=False)
    return tmp_path


def test_prepare_dashboard_data_for_demo_business():
    data = prepare_dashboard_data(demo_invoices(TODAY), demo_expenses(TODAY), DEMO_BUSINESS, today=TODAY)

    metrics = data["metrics"]
    assert metrics["total_revenue"] == pytest.approx(5000.0)
    assert metrics["accounts_receivable"] == pytest.approx(2500.0)
    assert metrics["total_expenses"] == pytest.approx(280.5)
    assert metrics["invoice_yield"] == pytest.approx(5000.0 / 7500.0 * 100)

    assert [insight.action for insight in data["insights"]] == ["Review AR", "View Expenses"]
    assert "Software (53% of total)" in data["insights"][1].message

    health = data["financial_health"]
    assert len(health) == 7
    assert health[-2].revenue == pytest.approx(7500.0)
    assert len(data["financial_health_df"]) == 7
    assert data["category_df"]["Category"].iloc[0] == "Software"
    assert data["as_of"] == TODAY
    assert data["customers"] == {}


def test_load_dashboard_data_from_csv(ledger_dir):
    data = load_dashboard_data(
        ledger_dir / "invoices.csv",
        ledger_dir / "expenses.csv",
        BusinessContext(name="Oak Studio", currency="GBP"),
        today=TODAY,
    )

    assert data["invoices"][0].status == "paid"
    assert data["expenses"][1].category == "Uncategorized"
    assert data["insights"][0].message == "You have £300.00 in outstanding invoices."
    assert data["insights"][-1].action == "Edit Terms"
    by_period = {point.period: point for point in data["financial_health"]}
    assert by_period["2024-06"].revenue == pytest.approx(900.0)
    assert by_period["2024-06"].expenses == pytest.approx(140.0)
    assert by_period["2024-05"].revenue == pytest.approx(300.0)


def test_load_dashboard_data_rejects_missing_amount(ledger_dir):
    broken = pd.read_csv(ledger_dir / "invoices.csv")
    broken.loc[1, "total_amount"] = None
    broken.to_csv(ledger_dir / "invoices.csv", index=False)

    with pytest.raises(ValidationError, match="total_amount"):
        load_dashboard_data(
            ledger_dir / "invoices.csv",
            ledger_dir / "expenses.csv",
            DEMO_BUSINESS,
            today=TODAY,
        )


def test_missing_csv_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_invoices(str(tmp_path / "nope.csv"))


def test_synthetic_ledger_is_seeded_and_valid():
    invoices_a, expenses_a = generate_synthetic_ledger(months_full=3, end_date="2024-06-20", seed=11)
    invoices_b, expenses_b = generate_synthetic_ledger(months_full=3, end_date="2024-06-20", seed=11)

    pd.testing.assert_frame_equal(invoices_a, invoices_b)
    pd.testing.assert_frame_equal(expenses_a, expenses_b)
    assert invoices_a["issue_date"].min() >= "2024-03-01"
    assert invoices_a["issue_date"].max() <= "2024-06-20"
    assert (expenses_a["amount"] > 0).all()

    data = prepare_dashboard_data(
        invoices_a.to_dict(orient="records"),
        expenses_a.to_dict(orient="records"),
        DEMO_BUSINESS,
        today=TODAY,
    )
    assert len(data["financial_health"]) == 7


def test_write_ledger_csv_round_trips_through_loader(tmp_path):
    invoices_path, expenses_path, customers_path = write_ledger_csv(
        tmp_path, seed=3, months_full=2, end_date="2024-06-20"
    )

    data = load_dashboard_data(invoices_path, expenses_path, DEMO_BUSINESS, today=TODAY, customers_csv=customers_path)

    assert data["invoices"]
    assert data["expenses"]
    assert data["customers"] == {"cust-1": "Acme Corp", "cust-2": "Globex Inc", "cust-3": "Initech"}
    assert {invoice.customer_id for invoice in data["invoices"]} <= set(data["customers"])


def test_synthetic_ledger_requires_positive_months():
    with pytest.raises(ValueError):
        generate_synthetic_ledger(months_full=0)


def test_load_dashboard_data_reads_customer_names(ledger_dir):
    pd.DataFrame(
        [
            {"id": "c1", "name": " Oak Furniture "},
            {"id": "c2", "name": None},
            {"id": None, "name": "Orphan"},
        ]
    ).to_csv(ledger_dir / "customers.csv", index=False)

    data = load_dashboard_data(
        ledger_dir / "invoices.csv",
        ledger_dir / "expenses.csv",
        DEMO_BUSINESS,
        today=TODAY,
        customers_csv=ledger_dir / "customers.csv",
    )

    assert data["customers"] == {"c1": "Oak Furniture", "c2": "c2"}


def test_missing_customers_csv_raises(ledger_dir):
    with pytest.raises(FileNotFoundError):
        load_dashboard_data(
            ledger_dir / "invoices.csv",
            ledger_dir / "expenses.csv",
            DEMO_BUSINESS,
            today=TODAY,
            customers_csv=ledger_dir / "customers.csv",
        )
