"""Core domain package for the Ledgerly application."""

from .models import (
    BusinessContext,
    DashboardData,
    DashboardMetrics,
    Expense,
    FinancialHealthPoint,
    Insight,
    Invoice,
)
from .validation import ValidationError

__all__ = [
    "BusinessContext",
    "DashboardData",
    "DashboardMetrics",
    "Expense",
    "FinancialHealthPoint",
    "Insight",
    "Invoice",
    "ValidationError",
]
