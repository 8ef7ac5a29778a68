"""Overview dashboard page layout."""

from __future__ import annotations

import html

import streamlit as st

from analytics.insights import resolve_insight_route
from app.layout import INSIGHT_ACCENTS, card, navigate_to
from core import DashboardData, DashboardMetrics, Insight
from core.formatting import currency_symbol, format_currency, format_percent
from visualization import build_financial_health_chart

_INSIGHT_ICONS = {"warning": "⚠️", "suggestion": "💡", "success": "✅"}


def _render_metric_cards(metrics: DashboardMetrics, currency: str) -> None:
    cols = st.columns(5)
    cols[0].metric("Revenue", format_currency(metrics["total_revenue"], currency))
    cols[1].metric("Expenses", format_currency(metrics["total_expenses"], currency))
    cols[2].metric("Profit", format_currency(metrics["profit"], currency))
    cols[3].metric("Receivable", format_currency(metrics["accounts_receivable"], currency))
    cols[4].metric("Invoice Yield", format_percent(metrics["invoice_yield"]))


def _render_health_card(data: DashboardData, currency: str) -> None:
    chart = build_financial_health_chart(data["financial_health_df"], currency_symbol(currency))
    st.plotly_chart(chart, use_container_width=True, key="financial-health")
    projected = data["financial_health"][-1]
    st.caption(
        f"{projected.month} projection: {format_currency(projected.revenue, currency)} revenue, "
        f"{format_currency(projected.expenses, currency)} expenses. "
        "Projection applies fixed +10% revenue / +5% expense growth to the last three months."
    )


def insight_markup(insight: Insight) -> str:
    """Return the accent-bordered HTML block for ``insight``."""

    accent = INSIGHT_ACCENTS.get(insight.type, "#6B7280")
    icon = _INSIGHT_ICONS.get(insight.type, "")
    return f"<div class='lg-insight' style='--accent:{accent}'>{icon} {html.escape(insight.message)}</div>"


def _render_insight(insight: Insight, index: int) -> None:
    st.markdown(insight_markup(insight), unsafe_allow_html=True)
    if insight.action and st.button(f"{insight.action} →", key=f"insight-action-{index}"):
        route = resolve_insight_route(insight.action)
        if route is not None:
            navigate_to(route)


def _render_insights_card(insights: list[Insight]) -> None:
    if not insights:
        st.info("No insights available yet. Add more data")
        return
    for index, insight in enumerate(insights):
        _render_insight(insight, index)


def render_page(data: DashboardData) -> None:
    """Render the main dashboard overview page."""

    business = data["business"]
    st.title("Dashboard")
    st.caption(f"Overview for {business.name} · as of {data['as_of']:%d %b %Y}")

    _render_metric_cards(data["metrics"], business.currency)

    chart_col, insights_col = st.columns([2, 1], gap="medium")
    with chart_col:
        with card("Financial Health", suffix="Last 6 months + projection"):
            _render_health_card(data, business.currency)
    with insights_col:
        with card("Strategy & Insights", suffix="Rule based"):
            _render_insights_card(data["insights"])


__all__ = ["insight_markup", "render_page"]
