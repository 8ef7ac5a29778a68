"""Visualization utilities for Ledgerly dashboards."""

from .charts import build_category_chart, build_financial_health_chart
from .theme import theme_tokens

__all__ = [
    "build_category_chart",
    "build_financial_health_chart",
    "theme_tokens",
]
