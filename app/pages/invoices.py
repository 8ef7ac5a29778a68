"""Invoices page: receivables table with status filter and search."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from app.layout import card
from core import DashboardData
from core.formatting import format_currency
from core.models import INVOICE_STATUSES

INVOICE_TABLE_COLUMNS = ["Number", "Customer", "Status", "Issued", "Due", "Total", "Overdue"]


def invoice_table(data: DashboardData) -> pd.DataFrame:
    """Tabulate the dashboard's invoices with customer names resolved."""

    today = data["as_of"]
    customers = data.get("customers", {})
    records = [
        {
            "Number": invoice.invoice_number or invoice.id,
            "Customer": customers.get(invoice.customer_id, invoice.customer_id) if invoice.customer_id else "",
            "Status": invoice.status,
            "Issued": invoice.issue_date,
            "Due": invoice.due_date,
            "Total": invoice.total_amount,
            "Overdue": invoice.is_open and invoice.due_date < today,
        }
        for invoice in data["invoices"]
    ]
    return pd.DataFrame(records, columns=INVOICE_TABLE_COLUMNS)


def filter_invoices(table: pd.DataFrame, query: str | None) -> pd.DataFrame:
    """Keep rows whose invoice number or customer name contains ``query`` (case-insensitive)."""

    needle = (query or "").strip()
    if not needle:
        return table
    matches = table["Number"].astype(str).str.contains(needle, case=False, regex=False) | table[
        "Customer"
    ].astype(str).str.contains(needle, case=False, regex=False)
    return table[matches]


def render_page(data: DashboardData) -> None:
    """Render the invoices page."""

    currency = data["business"].currency
    st.title("Invoices")

    table = invoice_table(data)
    search_col, status_col = st.columns([2, 3], gap="medium")
    query = search_col.text_input("Search", placeholder="Invoice number or customer", key="invoice-search")
    statuses = sorted(set(INVOICE_STATUSES) | set(table["Status"]))
    selected = status_col.multiselect("Status", statuses, default=[s for s in statuses if s != "cancelled"])
    filtered = filter_invoices(table[table["Status"].isin(selected)], query)

    with card("Receivables", suffix=f"{len(filtered)} invoices"):
        st.metric("Accounts receivable", format_currency(data["metrics"]["accounts_receivable"], currency))
        if filtered.empty:
            st.info("No invoices match the current filters.")
        else:
            st.dataframe(
                filtered.sort_values("Issued", ascending=False),
                use_container_width=True,
                hide_index=True,
            )


__all__ = ["filter_invoices", "invoice_table", "render_page"]
