"""Shared layout primitives for the Ledgerly Streamlit app."""

from __future__ import annotations

import html
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable

import streamlit as st


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    enabled: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("overview", "Dashboard", True),
    NavigationLink("invoices", "Invoices", True),
    NavigationLink("expenses", "Expenses", True),
    NavigationLink("customers", "Customers", False),
    NavigationLink("projects", "Projects", False),
)

INSIGHT_ACCENTS: dict[str, str] = {
    "warning": "#EF4444",
    "suggestion": "#3B82F6",
    "success": "#10B981",
}


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F7F4EF;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .lg-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .lg-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #5B3A1E;
          }

          .lg-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .lg-nav__link,
          .lg-nav__link:visited {
            font-weight: 600;
            color: #6B5B4B;
            text-decoration: none;
          }

          .lg-nav__link.is-active {
            color: #5B3A1E;
            border-bottom: 3px solid #A16207;
          }

          .lg-nav__link.is-disabled {
            color: #C8BBAA;
            pointer-events: none;
          }

          .lg-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .lg-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            gap: 12px;
          }

          .lg-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            font-weight: 600;
            color: #111827;
          }

          .lg-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #E7D8C3;
            background: #FBF6EE;
            color: #7C4A12;
          }

          .lg-insight {
            border-left: 4px solid var(--accent);
            padding: 0.6rem 0.9rem;
            border-radius: 8px;
            background: #FFFFFF;
            font-weight: 500;
            color: #1F2937;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable Ledgerly card."""

    chip_html = f'<span class="lg-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="lg-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="lg-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def navbar_markup(active_page: str, business_name: str) -> str:
    """Return the navigation bar HTML with the active link highlighted."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        css_class = "lg-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'

        if link.enabled:
            link_markup.append(
                f'<a class="{css_class}" href="?page={link.slug}"{aria_current} target="_self">{link.label}</a>'
            )
        else:
            link_markup.append(f'<span class="{css_class} is-disabled">{link.label}</span>')

    return f"""
        <nav class="lg-nav">
            <div class="lg-nav__brand">Ledgerly · {html.escape(business_name)}</div>
            <div class="lg-nav__links">{''.join(link_markup)}</div>
        </nav>
        """


def render_navbar(active_page: str, business_name: str) -> None:
    """Render the dashboard navigation bar with active state."""

    st.markdown(navbar_markup(active_page, business_name), unsafe_allow_html=True)


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", "overview")
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "overview"

    if st.session_state.get("active_page") != page:
        st.session_state["active_page"] = page

    if params.get("page") != page:
        st.query_params["page"] = page

    return page


def navigate_to(page: str) -> None:
    """Switch the active page and rerun the script."""

    st.session_state["active_page"] = page
    st.query_params["page"] = page
    st.rerun()


__all__ = [
    "INSIGHT_ACCENTS",
    "NavigationLink",
    "NAV_LINKS",
    "card",
    "determine_active_page",
    "inject_css",
    "navbar_markup",
    "navigate_to",
    "render_navbar",
]
