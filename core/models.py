"""Shared data model definitions for the Ledgerly dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional, TypedDict

import pandas as pd

InsightType = Literal["warning", "suggestion", "success"]

INVOICE_STATUSES: tuple[str, ...] = ("draft", "sent", "paid", "overdue", "cancelled")
STATUS_PAID = "paid"
STATUS_CANCELLED = "cancelled"


@dataclass(frozen=True)
class Invoice:
    id: str
    status: str
    total_amount: float
    issue_date: date
    due_date: date
    customer_id: Optional[str] = None
    invoice_number: Optional[str] = None

    @property
    def is_open(self) -> bool:
        """True while the invoice still counts towards accounts receivable."""

        return self.status not in (STATUS_PAID, STATUS_CANCELLED)


@dataclass(frozen=True)
class Expense:
    amount: float
    category: str
    date: date
    id: Optional[str] = None
    description: str = ""


@dataclass(frozen=True)
class BusinessContext:
    """The business (tenant) a dashboard is computed for."""

    name: str
    currency: str = "USD"
    id: Optional[str] = None


@dataclass(frozen=True)
class Insight:
    type: InsightType
    message: str
    action: Optional[str] = None


@dataclass(frozen=True)
class FinancialHealthPoint:
    month: str
    period: str
    revenue: float
    expenses: float
    profit: float
    is_projected: bool = False


class DashboardMetrics(TypedDict):
    total_revenue: float
    total_expenses: float
    profit: float
    accounts_receivable: float
    total_billed: float
    invoice_yield: float


class DashboardData(TypedDict):
    business: BusinessContext
    metrics: DashboardMetrics
    financial_health: list[FinancialHealthPoint]
    financial_health_df: pd.DataFrame
    category_df: pd.DataFrame
    insights: list[Insight]
    invoices: list[Invoice]
    expenses: list[Expense]
    customers: dict[str, str]
    as_of: date


__all__ = [
    "INVOICE_STATUSES",
    "STATUS_CANCELLED",
    "STATUS_PAID",
    "BusinessContext",
    "DashboardData",
    "DashboardMetrics",
    "Expense",
    "FinancialHealthPoint",
    "Insight",
    "InsightType",
    "Invoice",
]
