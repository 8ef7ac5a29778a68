"""Expenses page: category donut and searchable expense table."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from analytics.categorisation import expenses_frame
from app.layout import card
from core import DashboardData
from core.formatting import currency_symbol, format_currency
from visualization import build_category_chart


def filter_expenses(frame: pd.DataFrame, query: str | None = None, category: str | None = None) -> pd.DataFrame:
    """Filter an :func:`expenses_frame` by search text and exact category.

    The search matches description or category text, ignoring case.
    """

    if category and category != "All":
        frame = frame[frame["category"] == category]
    needle = (query or "").strip()
    if needle:
        matches = frame["description"].fillna("").str.contains(needle, case=False, regex=False) | frame[
            "category"
        ].str.contains(needle, case=False, regex=False)
        frame = frame[matches]
    return frame


def render_page(data: DashboardData) -> None:
    """Render the expenses page."""

    currency = data["business"].currency
    category_df = data["category_df"]
    st.title("Expenses")

    chart_col, table_col = st.columns([2, 3], gap="medium")
    with chart_col:
        with card("Spend by category"):
            if category_df.empty:
                st.info("No expenses recorded yet.")
            else:
                chart = build_category_chart(category_df, currency_symbol(currency))
                st.plotly_chart(chart, use_container_width=True, key="category-donut")
                st.caption(f"Total {format_currency(data['metrics']['total_expenses'], currency)}")

    with table_col:
        with card("All expenses"):
            frame = expenses_frame(data["expenses"])
            categories = ["All", *sorted(frame["category"].unique())]
            query = st.text_input("Search", placeholder="Description or category", key="expense-search")
            choice = st.selectbox("Category", categories, index=0)
            frame = filter_expenses(frame, query, choice)
            if frame.empty:
                st.info("No expenses match the current filters.")
            else:
                st.dataframe(
                    frame.drop(columns=["id"]).sort_values("date", ascending=False),
                    use_container_width=True,
                    hide_index=True,
                )


__all__ = ["filter_expenses", "render_page"]
