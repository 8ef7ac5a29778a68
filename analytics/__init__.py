"""Analytics helpers shared across Ledgerly services."""

from analytics.categorisation import build_category_breakdown, expenses_frame
from analytics.forecasting import (
    FORECAST_EXPENSE_GROWTH,
    FORECAST_LOOKBACK_MONTHS,
    FORECAST_REVENUE_GROWTH,
    HEALTH_WINDOW_MONTHS,
    build_month_window,
    compute_financial_health,
    health_points_frame,
    project_next_month,
)
from analytics.insights import (
    INSIGHT_ACTION_ROUTES,
    accounts_receivable,
    generate_insights,
    resolve_insight_route,
    top_expense_category,
)
from analytics.metrics import compute_dashboard_metrics

__all__ = [
    "build_category_breakdown",
    "expenses_frame",
    "FORECAST_EXPENSE_GROWTH",
    "FORECAST_LOOKBACK_MONTHS",
    "FORECAST_REVENUE_GROWTH",
    "HEALTH_WINDOW_MONTHS",
    "build_month_window",
    "compute_financial_health",
    "health_points_frame",
    "project_next_month",
    "INSIGHT_ACTION_ROUTES",
    "accounts_receivable",
    "generate_insights",
    "resolve_insight_route",
    "top_expense_category",
    "compute_dashboard_metrics",
]
