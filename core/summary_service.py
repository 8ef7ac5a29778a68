"""Core logic for assembling Ledgerly dashboard summaries."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Mapping, Optional

from analytics.categorisation import build_category_breakdown
from analytics.forecasting import HEALTH_WINDOW_MONTHS, compute_financial_health, health_points_frame
from analytics.insights import generate_insights
from analytics.metrics import compute_dashboard_metrics
from core.data_loader import frame_records, load_customers, load_expenses, load_invoices
from core.models import BusinessContext, DashboardData
from core.validation import ExpenseLike, InvoiceLike, coerce_expenses, coerce_invoices, normalize_currency

__all__ = ["load_dashboard_data", "prepare_dashboard_data"]

logger = logging.getLogger(__name__)


def prepare_dashboard_data(
    invoices: Iterable[InvoiceLike],
    expenses: Iterable[ExpenseLike],
    business: BusinessContext,
    today: Optional[date] = None,
    window: int = HEALTH_WINDOW_MONTHS,
    customers: Optional[Mapping[str, str]] = None,
) -> DashboardData:
    """Validate one business's records and compute everything the dashboard shows.

    ``customers`` maps customer ids to display names for the invoice table.

    Raises :class:`core.validation.ValidationError` when any record is
    malformed; nothing is computed from partially valid input.
    """

    as_of = today if today is not None else date.today()
    currency = normalize_currency(business.currency)
    invoice_records = coerce_invoices(invoices)
    expense_records = coerce_expenses(expenses)

    metrics = compute_dashboard_metrics(invoice_records, expense_records)
    health = compute_financial_health(invoice_records, expense_records, as_of, window=window)
    insights = generate_insights(invoice_records, expense_records, currency, today=as_of)
    category_df = build_category_breakdown(expense_records)

    logger.info(
        "Prepared dashboard for %s as of %s: %d invoices, %d expenses, %d insights",
        business.name,
        as_of.isoformat(),
        len(invoice_records),
        len(expense_records),
        len(insights),
    )

    return {
        "business": business,
        "metrics": metrics,
        "financial_health": health,
        "financial_health_df": health_points_frame(health),
        "category_df": category_df,
        "insights": insights,
        "invoices": invoice_records,
        "expenses": expense_records,
        "customers": dict(customers or {}),
        "as_of": as_of,
    }


def load_dashboard_data(
    invoices_csv: str | Path,
    expenses_csv: str | Path,
    business: BusinessContext,
    today: Optional[date] = None,
    customers_csv: str | Path | None = None,
) -> DashboardData:
    """Load CSV exports for ``business`` and prepare the dashboard from them.

    The customers export is optional; without it the invoice table shows ids.
    """

    invoices_df = load_invoices(str(invoices_csv))
    expenses_df = load_expenses(str(expenses_csv))
    customers = load_customers(str(customers_csv)) if customers_csv is not None else {}
    return prepare_dashboard_data(
        frame_records(invoices_df),
        frame_records(expenses_df),
        business,
        today=today,
        customers=customers,
    )
