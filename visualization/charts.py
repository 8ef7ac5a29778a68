"""Plotly chart builders for the Ledgerly dashboard."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_category_chart",
    "build_financial_health_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_financial_health_chart(health_df: pd.DataFrame, currency_symbol: str | None = "$") -> go.Figure:
    """Render monthly revenue and expense bars with a profit line.

    The projected month is drawn with faded bars and a dashed profit segment so
    it never reads as observed data.
    """

    if health_df.empty:
        return _empty_plotly_figure("No financial data yet.")

    df = health_df.copy()
    is_projected = df["Series"].astype(str).str.lower() == "projected"
    labels = [
        f"{month} (proj.)" if projected else month
        for month, projected in zip(df["Month"], is_projected)
    ]
    df["Label"] = labels

    currency_prefix = currency_symbol or ""
    hover_template = f"%{{x}}<br>%{{fullData.name}}: {currency_prefix}%{{y:,.2f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=df["Label"],
            y=df["Revenue"],
            name="Revenue",
            marker=dict(
                color=[TOKENS.revenue_green_soft if flag else TOKENS.revenue_green for flag in is_projected],
            ),
            hovertemplate=hover_template,
        )
    )
    fig.add_trace(
        go.Bar(
            x=df["Label"],
            y=df["Expenses"],
            name="Expenses",
            marker=dict(
                color=[TOKENS.expense_red_soft if flag else TOKENS.expense_red for flag in is_projected],
            ),
            hovertemplate=hover_template,
        )
    )

    actual = df[~is_projected]
    fig.add_trace(
        go.Scatter(
            x=actual["Label"],
            y=actual["Profit"],
            mode="lines+markers",
            name="Profit",
            line=dict(color=TOKENS.profit_blue, width=3, shape="spline", smoothing=0.45),
            marker=dict(size=7, color=TOKENS.profit_blue, line=dict(color=TOKENS.neutral_white, width=1.5)),
            hovertemplate=hover_template,
        )
    )

    if is_projected.any() and not actual.empty:
        bridge = pd.concat([actual.tail(1), df[is_projected]])
        fig.add_trace(
            go.Scatter(
                x=bridge["Label"],
                y=bridge["Profit"],
                mode="lines+markers",
                name="Projected profit",
                line=dict(color=TOKENS.neutral_grey, width=2, dash="dash"),
                marker=dict(size=6, color=TOKENS.neutral_grey, line=dict(color=TOKENS.neutral_white, width=1.2)),
                hovertemplate=hover_template,
            )
        )

    fig.update_layout(
        title="",
        barmode="group",
        xaxis_title="",
        yaxis_title="Amount",
        margin=dict(l=0, r=0, t=20, b=0),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(showgrid=False),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.grid_color, zeroline=True, tickprefix=currency_prefix),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig


def build_category_chart(category_df: pd.DataFrame, currency_symbol: str | None = "$") -> go.Figure:
    """Render a donut chart for the expense category distribution."""

    palette = list(TOKENS.category_palette)

    if category_df.empty:
        empty = pd.DataFrame({"Category": [], "Amount": []})
        fig = px.pie(empty, names="Category", values="Amount", hole=0.55)
        fig.update_layout(showlegend=False, margin=dict(l=0, r=0, t=0, b=0))
        return fig

    data = category_df.sort_values("Amount", ascending=False).reset_index(drop=True)
    if len(data) > len(palette):
        repeats = (len(data) // len(palette)) + 1
        color_sequence = (palette * repeats)[: len(data)]
    else:
        color_sequence = palette[: len(data)]

    fig = px.pie(
        data,
        names="Category",
        values="Amount",
        hole=0.55,
        color="Category",
        color_discrete_sequence=color_sequence,
    )

    currency_prefix = currency_symbol or ""
    fig.update_traces(
        textposition="inside",
        texttemplate="%{label}<br>%{percent:.1%}",
        customdata=data[["Amount", "Share", "Count"]],
        hovertemplate=(
            "%{label}<br>"
            f"Spend: {currency_prefix}%{{customdata[0]:,.0f}}<br>"
            "Share: %{customdata[1]:.1%}<br>"
            "Entries: %{customdata[2]}<extra></extra>"
        ),
        marker=dict(line=dict(color=TOKENS.neutral_white, width=2)),
    )

    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(
            title="",
            orientation="v",
            yanchor="middle",
            y=0.5,
            xanchor="left",
            x=1.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        showlegend=True,
    )

    return fig
