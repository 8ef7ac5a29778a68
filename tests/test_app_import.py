import importlib
import sys
from datetime import date
from pathlib import Path

import plotly.graph_objects as go
import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from analytics.forecasting import compute_financial_health, health_points_frame
from config import get_settings
from core.formatting import format_currency
from visualization import build_category_chart, build_financial_health_chart, theme_tokens


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LEDGERLY_BUSINESS_NAME", "Oak & Ash")
    monkeypatch.setenv("LEDGERLY_BUSINESS_CURRENCY", "gbp")

    settings = get_settings()

    assert settings.business.name == "Oak & Ash"
    assert settings.business.currency == "GBP"


def test_settings_prefer_streamlit_secrets(monkeypatch):
    monkeypatch.setattr(st, "secrets", {"business": {"name": "Secret Co", "currency": "EUR"}}, raising=False)

    settings = get_settings()

    assert settings.business_name == "Secret Co"
    assert settings.business_currency == "EUR"
    assert settings.demo_mode is True


@pytest.mark.parametrize(
    ("amount", "currency", "expected"),
    [
        (1234.5, "USD", "$1,234.50"),
        (-20, "USD", "-$20.00"),
        (99, "eur", "€99.00"),
        (1200, "JPY", "¥1,200"),
        (10, "CHF", "CHF 10.00"),
        (0, None, "$0.00"),
        (0.125, "USD", "$0.13"),
        (-0.125, "USD", "-$0.13"),
        (2.5, "JPY", "¥3"),
        (-0.004, "USD", "$0.00"),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_financial_health_chart_traces():
    invoices = [{"id": "a", "status": "paid", "total_amount": 500, "issue_date": "2024-05-02", "due_date": "2024-05-30"}]
    expenses = [{"amount": 200, "category": "Rent", "date": "2024-05-01"}]
    frame = health_points_frame(compute_financial_health(invoices, expenses, date(2024, 6, 1)))

    fig = build_financial_health_chart(frame)

    assert isinstance(fig, go.Figure)
    names = [trace.name for trace in fig.data]
    assert names == ["Revenue", "Expenses", "Profit", "Projected profit"]
    assert list(fig.data[0].x)[-1] == "Jul (proj.)"
    assert fig.layout.yaxis.gridcolor == theme_tokens().grid_color


def test_empty_charts_render():
    import pandas as pd

    assert isinstance(build_financial_health_chart(pd.DataFrame()), go.Figure)
    assert isinstance(build_category_chart(pd.DataFrame(columns=["Category", "Amount"])), go.Figure)
