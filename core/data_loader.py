"""Data loading utilities for Ledgerly's dashboard pipeline."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Final

import pandas as pd

__all__ = ["frame_records", "load_customers", "load_expenses", "load_invoices"]


_CACHE_SIZE: Final[int] = 8

INVOICE_COLUMNS: Final[tuple[str, ...]] = (
    "id",
    "invoice_number",
    "customer_id",
    "status",
    "issue_date",
    "due_date",
    "total_amount",
)
EXPENSE_COLUMNS: Final[tuple[str, ...]] = ("id", "date", "category", "description", "amount")
CUSTOMER_COLUMNS: Final[tuple[str, ...]] = ("id", "name")
_TEXT_COLUMNS: Final[tuple[str, ...]] = ("id", "customer_id", "invoice_number", "status", "category", "description", "name")


def _read_csv(path: Path, columns: tuple[str, ...]) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    header = pd.read_csv(path, nrows=0).columns
    text_columns = {column: str for column in _TEXT_COLUMNS if column in header}
    df = pd.read_csv(path, dtype=text_columns)
    missing = [column for column in columns if column not in df.columns]
    for column in missing:
        df[column] = None
    return df[list(columns)]


@lru_cache(maxsize=_CACHE_SIZE)
def load_invoices(csv_path: str | Path) -> pd.DataFrame:
    """Return the invoices export at ``csv_path``.

    Dates are kept as the ISO strings found in the file; validation turns them
    into calendar dates without any time-zone handling.
    """

    df = _read_csv(Path(csv_path), INVOICE_COLUMNS)
    df["status"] = df["status"].str.strip().str.lower()
    return df


@lru_cache(maxsize=_CACHE_SIZE)
def load_expenses(csv_path: str | Path) -> pd.DataFrame:
    """Return the expenses export at ``csv_path``."""

    df = _read_csv(Path(csv_path), EXPENSE_COLUMNS)
    df["category"] = df["category"].fillna("Uncategorized")
    df["description"] = df["description"].fillna("")
    return df


@lru_cache(maxsize=_CACHE_SIZE)
def load_customers(csv_path: str | Path) -> dict[str, str]:
    """Return a customer id to display name map from the customers export.

    Rows without an id are skipped; a missing name falls back to the id.
    """

    df = _read_csv(Path(csv_path), CUSTOMER_COLUMNS).dropna(subset=["id"])
    names = df["name"].fillna(df["id"]).str.strip()
    return dict(zip(df["id"].str.strip(), names))


def frame_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a loaded frame into row mappings, mapping missing cells to ``None``."""

    cleaned = df.astype(object).where(pd.notna(df), None)
    return cleaned.to_dict(orient="records")
