"""Ledgerly dashboard with responsive card layout."""

from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from app.layout import NAV_LINKS, determine_active_page, inject_css, render_navbar
from app.pages import render_expenses_page, render_invoices_page, render_overview_page
from config import Settings, configure_logging, get_settings
from core import DashboardData, ValidationError
from core.summary_service import load_dashboard_data, prepare_dashboard_data
from data.demo import DEMO_BUSINESS, demo_customer_names, demo_expenses, demo_invoices

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "overview": render_overview_page,
    "invoices": render_invoices_page,
    "expenses": render_expenses_page,
}


@st.cache_data(show_spinner=False)
def _load_dashboard_data(as_of: date) -> DashboardData:
    """Load and cache dashboard data for the configured business."""

    settings = get_settings()
    if settings.has_ledger_files:
        return load_dashboard_data(
            settings.invoices_csv,
            settings.expenses_csv,
            settings.business,
            today=as_of,
            customers_csv=settings.customer_export,
        )
    if not settings.demo_mode:
        raise FileNotFoundError(
            f"Ledger exports not found: {settings.invoices_csv}, {settings.expenses_csv}"
        )
    logger.info("No ledger exports configured; using the demo business")
    return prepare_dashboard_data(
        demo_invoices(as_of),
        demo_expenses(as_of),
        DEMO_BUSINESS,
        today=as_of,
        customers=demo_customer_names(),
    )


def _resolve_data(settings: Settings) -> DashboardData | None:
    try:
        return _load_dashboard_data(date.today())
    except ValidationError as exc:
        logger.error("Ledger data failed validation: %s", exc)
        st.error(f"Some records could not be read: {exc}")
    except FileNotFoundError as exc:
        st.error(str(exc))
        st.caption(f"Set LEDGERLY_INVOICES_CSV / LEDGERLY_EXPENSES_CSV or enable demo mode ({settings.demo_mode}).")
    return None


def main() -> None:
    """Application entrypoint for the Ledgerly dashboard."""

    st.set_page_config(
        page_title="Ledgerly | Dashboard",
        page_icon="📒",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    settings = get_settings()
    configure_logging(settings.log_level)

    inject_css()
    valid_pages = [link.slug for link in NAV_LINKS if link.enabled]
    active_page = determine_active_page(valid_pages)

    data = _resolve_data(settings)
    render_navbar(active_page, data["business"].name if data else settings.business_name)
    if data is None:
        st.stop()
        return

    PAGE_RENDERERS.get(active_page, render_overview_page)(data)


if __name__ == "__main__":
    main()
