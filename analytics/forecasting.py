"""Monthly financial health roll-up and next-month projection."""

from __future__ import annotations

import logging
from datetime import date
from typing import Final, Iterable, Sequence

import pandas as pd

from core.models import STATUS_CANCELLED, FinancialHealthPoint
from core.validation import ExpenseLike, InvoiceLike, coerce_expenses, coerce_invoices

__all__ = [
    "FORECAST_EXPENSE_GROWTH",
    "FORECAST_LOOKBACK_MONTHS",
    "FORECAST_REVENUE_GROWTH",
    "HEALTH_WINDOW_MONTHS",
    "build_month_window",
    "compute_financial_health",
    "health_points_frame",
    "project_next_month",
]

logger = logging.getLogger(__name__)

HEALTH_WINDOW_MONTHS: Final[int] = 6
FORECAST_LOOKBACK_MONTHS: Final[int] = 3

# Fixed growth placeholders for the projected month. This is not a model.
FORECAST_REVENUE_GROWTH: Final[float] = 1.10
FORECAST_EXPENSE_GROWTH: Final[float] = 1.05

_HEALTH_COLUMNS: Final[list[str]] = ["Month", "Period", "Revenue", "Expenses", "Profit", "Series"]


def build_month_window(today: date, window: int = HEALTH_WINDOW_MONTHS) -> pd.PeriodIndex:
    """Return the ``window`` calendar months ending with the month of ``today``."""

    if window < 1:
        raise ValueError(f"window must be at least one month, got {window}")
    return pd.period_range(end=pd.Period(today, freq="M"), periods=window, freq="M")


def _monthly_totals(
    frame: pd.DataFrame,
    date_column: str,
    amount_column: str,
    months: pd.PeriodIndex,
) -> pd.Series:
    if frame.empty:
        return pd.Series(0.0, index=months, dtype=float)

    periods = pd.to_datetime(frame[date_column]).dt.to_period("M")
    totals = frame.groupby(periods)[amount_column].sum()
    return totals.reindex(months, fill_value=0.0).astype(float)


def project_next_month(
    points: Sequence[FinancialHealthPoint],
    next_period: pd.Period,
    lookback: int = FORECAST_LOOKBACK_MONTHS,
) -> FinancialHealthPoint:
    """Project the month after ``points`` from the average of recent buckets.

    Revenue grows by 10% and expenses by 5% over the mean of the last
    ``lookback`` observed months (or fewer when the window is shorter).
    """

    observed = [point for point in points if not point.is_projected]
    if not observed:
        raise ValueError("Cannot project a month without at least one observed bucket")

    recent = observed[-lookback:]
    avg_revenue = sum(point.revenue for point in recent) / len(recent)
    avg_expenses = sum(point.expenses for point in recent) / len(recent)

    revenue = avg_revenue * FORECAST_REVENUE_GROWTH
    expenses = avg_expenses * FORECAST_EXPENSE_GROWTH
    return FinancialHealthPoint(
        month=next_period.strftime("%b"),
        period=str(next_period),
        revenue=revenue,
        expenses=expenses,
        profit=revenue - expenses,
        is_projected=True,
    )


def compute_financial_health(
    invoices: Iterable[InvoiceLike],
    expenses: Iterable[ExpenseLike],
    today: date,
    window: int = HEALTH_WINDOW_MONTHS,
) -> list[FinancialHealthPoint]:
    """Roll billed revenue and expenses up by month and append a projection.

    Returns ``window + 1`` points ordered oldest first; only the last one is
    flagged as projected. Cancelled invoices never count, every other status
    does.
    """

    months = build_month_window(today, window)
    invoice_records = coerce_invoices(invoices)
    expense_records = coerce_expenses(expenses)

    invoice_df = pd.DataFrame(
        {
            "issue_date": [invoice.issue_date for invoice in invoice_records],
            "total_amount": [invoice.total_amount for invoice in invoice_records],
            "status": [invoice.status for invoice in invoice_records],
        }
    )
    billed = invoice_df[invoice_df["status"] != STATUS_CANCELLED]
    expense_df = pd.DataFrame(
        {
            "date": [expense.date for expense in expense_records],
            "amount": [expense.amount for expense in expense_records],
        }
    )

    revenue = _monthly_totals(billed, "issue_date", "total_amount", months)
    spend = _monthly_totals(expense_df, "date", "amount", months)
    logger.debug(
        "Bucketed %d invoices and %d expenses into %d months ending %s",
        len(billed),
        len(expense_df),
        window,
        months[-1],
    )

    points: list[FinancialHealthPoint] = []
    for period in months:
        month_revenue = float(revenue.loc[period])
        month_expenses = float(spend.loc[period])
        points.append(
            FinancialHealthPoint(
                month=period.strftime("%b"),
                period=str(period),
                revenue=month_revenue,
                expenses=month_expenses,
                profit=month_revenue - month_expenses,
            )
        )

    points.append(project_next_month(points, months[-1] + 1))
    return points


def health_points_frame(points: Sequence[FinancialHealthPoint]) -> pd.DataFrame:
    """Return health points as a chart-ready data frame."""

    records = [
        {
            "Month": point.month,
            "Period": point.period,
            "Revenue": point.revenue,
            "Expenses": point.expenses,
            "Profit": point.profit,
            "Series": "Projected" if point.is_projected else "Actual",
        }
        for point in points
    ]
    return pd.DataFrame(records, columns=_HEALTH_COLUMNS)
