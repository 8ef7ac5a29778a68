"""Headline dashboard figures: collected revenue, spend, profit and receivables."""

from __future__ import annotations

from typing import Iterable

from core.models import STATUS_PAID, DashboardMetrics, Expense, Invoice

__all__ = ["compute_dashboard_metrics"]


def compute_dashboard_metrics(invoices: Iterable[Invoice], expenses: Iterable[Expense]) -> DashboardMetrics:
    """Return the KPI card values for already validated records.

    Revenue here is cash collected (paid invoices only), unlike the billed
    revenue used by the monthly health chart. Invoice yield is the collected
    share of everything billed, as a percentage.
    """

    invoices = list(invoices)
    total_revenue = float(sum(invoice.total_amount for invoice in invoices if invoice.status == STATUS_PAID))
    total_expenses = float(sum(expense.amount for expense in expenses))
    receivable = float(sum(invoice.total_amount for invoice in invoices if invoice.is_open))
    total_billed = total_revenue + receivable
    invoice_yield = (total_revenue / total_billed) * 100 if total_billed > 0 else 0.0

    return {
        "total_revenue": total_revenue,
        "total_expenses": total_expenses,
        "profit": total_revenue - total_expenses,
        "accounts_receivable": receivable,
        "total_billed": total_billed,
        "invoice_yield": float(invoice_yield),
    }
