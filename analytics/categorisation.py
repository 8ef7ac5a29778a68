"""Expense category aggregation helpers."""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from core.models import Expense

__all__ = [
    "build_category_breakdown",
    "expenses_frame",
]

_BREAKDOWN_COLUMNS = ["Category", "Amount", "Share", "Count", "Rank"]


def expenses_frame(expenses: Iterable[Expense]) -> pd.DataFrame:
    """Return validated expenses as a data frame for tables and grouping."""

    records = [
        {
            "id": expense.id,
            "date": pd.Timestamp(expense.date),
            "category": expense.category,
            "description": expense.description,
            "amount": expense.amount,
        }
        for expense in expenses
    ]
    return pd.DataFrame(records, columns=["id", "date", "category", "description", "amount"])


def build_category_breakdown(expenses: Iterable[Expense], top_n: int = 8) -> pd.DataFrame:
    """Summarise expense amounts per category, largest first.

    Categories beyond ``top_n`` are folded into an ``Other`` row so the donut
    chart keeps a readable number of slices. Shares are fractions of the grand
    total.
    """

    frame = expenses_frame(expenses)
    if frame.empty:
        return pd.DataFrame(columns=_BREAKDOWN_COLUMNS)

    grouped = frame.groupby("category", sort=False)["amount"].agg(["sum", "count"])
    grouped = grouped[grouped["sum"] > 0].sort_values("sum", ascending=False, kind="stable")
    if grouped.empty:
        return pd.DataFrame(columns=_BREAKDOWN_COLUMNS)

    if len(grouped) > top_n:
        head = grouped.head(top_n - 1)
        tail = grouped.iloc[top_n - 1 :]
        other = pd.DataFrame({"sum": [tail["sum"].sum()], "count": [tail["count"].sum()]}, index=["Other"])
        grouped = pd.concat([head, other])

    total_value = float(grouped["sum"].sum())
    breakdown = grouped.reset_index().rename(
        columns={"index": "Category", "category": "Category", "sum": "Amount", "count": "Count"}
    )
    breakdown["Amount"] = breakdown["Amount"].astype(float)
    breakdown["Count"] = breakdown["Count"].astype(int)
    breakdown["Share"] = breakdown["Amount"] / total_value
    breakdown["Rank"] = np.arange(1, len(breakdown) + 1)
    return breakdown[_BREAKDOWN_COLUMNS]
