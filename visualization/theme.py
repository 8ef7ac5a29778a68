"""Shared Plotly theme tokens for Ledgerly visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    revenue_green: str = "#16A34A"
    revenue_green_soft: str = "rgba(22, 163, 74, 0.35)"
    expense_red: str = "#DC2626"
    expense_red_soft: str = "rgba(220, 38, 38, 0.35)"
    profit_blue: str = "#2563EB"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    grid_color: str = "rgba(148, 163, 184, 0.25)"
    category_palette: tuple[str, ...] = (
        "#0C6FFD",
        "#5DA9FF",
        "#FF3B30",
        "#F97316",
        "#22C55E",
        "#7C3AED",
        "#F59E0B",
        "#FACC15",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
