"""Centralised configuration handling for Ledgerly."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models import BusinessContext
from core.validation import normalize_currency

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_BUSINESS_NAME = "Demo Corp (Oak)"
DEFAULT_CURRENCY = "USD"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    business_name: str = DEFAULT_BUSINESS_NAME
    business_currency: str = DEFAULT_CURRENCY
    invoices_csv: Path = BASE_DIR / "data" / "invoices.csv"
    expenses_csv: Path = BASE_DIR / "data" / "expenses.csv"
    customers_csv: Path = BASE_DIR / "data" / "customers.csv"
    demo_mode: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="LEDGERLY_", extra="ignore")

    @field_validator("business_currency")
    @classmethod
    def _check_currency(cls, value: str) -> str:
        return normalize_currency(value)

    @property
    def business(self) -> BusinessContext:
        return BusinessContext(name=self.business_name, currency=self.business_currency)

    @property
    def has_ledger_files(self) -> bool:
        return self.invoices_csv.exists() and self.expenses_csv.exists()

    @property
    def customer_export(self) -> Path | None:
        """The customers export, when one exists next to the ledger."""

        return self.customers_csv if self.customers_csv.exists() else None


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("business")
    if secrets_section:
        overrides = {
            "business_name": secrets_section.get("name"),
            "business_currency": secrets_section.get("currency"),
            "invoices_csv": secrets_section.get("invoices_csv"),
            "expenses_csv": secrets_section.get("expenses_csv"),
            "customers_csv": secrets_section.get("customers_csv"),
            "demo_mode": secrets_section.get("demo_mode"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
