"""Rule-based advisory insights for the dashboard."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Final, Iterable, Optional

import pandas as pd

from core.formatting import format_currency
from core.models import Expense, Insight, Invoice
from core.validation import ExpenseLike, InvoiceLike, coerce_expenses, coerce_invoices, normalize_currency

__all__ = [
    "ACTION_EDIT_TERMS",
    "ACTION_REVIEW_AR",
    "ACTION_VIEW_EXPENSES",
    "EXPENSE_CONCENTRATION_THRESHOLD",
    "INSIGHT_ACTION_ROUTES",
    "accounts_receivable",
    "generate_insights",
    "resolve_insight_route",
    "top_expense_category",
]

logger = logging.getLogger(__name__)

ACTION_REVIEW_AR: Final[str] = "Review AR"
ACTION_VIEW_EXPENSES: Final[str] = "View Expenses"
ACTION_EDIT_TERMS: Final[str] = "Edit Terms"

INSIGHT_ACTION_ROUTES: Final[dict[str, str]] = {
    ACTION_REVIEW_AR: "invoices",
    ACTION_VIEW_EXPENSES: "expenses",
    ACTION_EDIT_TERMS: "invoices",
}

# Rounded share (in percent) a single category must exceed to be flagged.
EXPENSE_CONCENTRATION_THRESHOLD: Final[int] = 30


def accounts_receivable(invoices: Iterable[Invoice]) -> float:
    """Sum of invoice totals that are neither paid nor cancelled."""

    return float(sum(invoice.total_amount for invoice in invoices if invoice.is_open))


def top_expense_category(expenses: list[Expense]) -> Optional[tuple[str, float]]:
    """Return the category with the highest summed amount and that sum.

    Ties go to the category that appears first in ``expenses``.
    """

    if not expenses:
        return None

    frame = pd.DataFrame(
        {
            "category": [expense.category for expense in expenses],
            "amount": [expense.amount for expense in expenses],
        }
    )
    totals = frame.groupby("category", sort=False)["amount"].sum()
    category = totals.idxmax()
    return str(category), float(totals.loc[category])


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _receivables_insight(ar_total: float, currency: str) -> Optional[Insight]:
    if ar_total <= 0:
        return None
    return Insight(
        type="warning",
        message=f"You have {format_currency(ar_total, currency)} in outstanding invoices.",
        action=ACTION_REVIEW_AR,
    )


def _expense_concentration_insight(expenses: list[Expense]) -> Optional[Insight]:
    total_expenses = sum(expense.amount for expense in expenses)
    if total_expenses <= 0:
        return None

    top = top_expense_category(expenses)
    if top is None:
        return None

    category, category_total = top
    percent = _round_half_up(category_total / total_expenses * 100)
    if percent <= EXPENSE_CONCENTRATION_THRESHOLD:
        return None
    return Insight(
        type="suggestion",
        message=(
            f"Your highest expense is {category} ({percent}% of total). "
            "Consider looking for cost-saving opportunities here."
        ),
        action=ACTION_VIEW_EXPENSES,
    )


def _payment_terms_insight(invoices: list[Invoice], ar_total: float, today: date) -> Optional[Insight]:
    if any(invoice.is_open and invoice.due_date < today for invoice in invoices):
        return Insight(
            type="warning",
            message="You have overdue invoices. Consider shortening your payment terms for new projects.",
            action=ACTION_EDIT_TERMS,
        )
    if ar_total == 0 and invoices:
        return Insight(
            type="success",
            message="Great job! All invoices are paid. Your cash flow looks healthy.",
        )
    return None


def generate_insights(
    invoices: Iterable[InvoiceLike],
    expenses: Iterable[ExpenseLike],
    currency: str | None = "USD",
    today: Optional[date] = None,
) -> list[Insight]:
    """Evaluate the advisory rules in order and return the ones that fire.

    The rules are independent: outstanding receivables, expense
    concentration, then either overdue invoices or a healthy cash-flow note.
    ``today`` only matters for the overdue check and defaults to the current
    date.
    """

    invoice_records = coerce_invoices(invoices)
    expense_records = coerce_expenses(expenses)
    currency_code = normalize_currency(currency)
    reference_day = today if today is not None else date.today()

    ar_total = accounts_receivable(invoice_records)
    candidates = (
        _receivables_insight(ar_total, currency_code),
        _expense_concentration_insight(expense_records),
        _payment_terms_insight(invoice_records, ar_total, reference_day),
    )
    insights = [insight for insight in candidates if insight is not None]
    logger.debug("Generated %d insights from %d invoices", len(insights), len(invoice_records))
    return insights


def resolve_insight_route(action: Optional[str]) -> Optional[str]:
    """Return the page slug an insight action navigates to, if any."""

    if action is None:
        return None
    route = INSIGHT_ACTION_ROUTES.get(action)
    if route is None:
        logger.warning("Unknown insight action: %s", action)
    return route
