"""Validation of invoice and expense records before they reach analytics.

Records usually arrive as row mappings straight from the database client, so
both mappings and :mod:`core.models` instances are accepted. Anything that
would otherwise turn into ``NaN`` inside a total is rejected here.
"""

from __future__ import annotations

import math
import numbers
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Union

import pandas as pd

from core.models import Expense, Invoice

__all__ = [
    "ValidationError",
    "coerce_amount",
    "coerce_date",
    "coerce_expenses",
    "coerce_invoices",
    "normalize_currency",
]

InvoiceLike = Union[Invoice, Mapping[str, Any]]
ExpenseLike = Union[Expense, Mapping[str, Any]]

DEFAULT_CURRENCY = "USD"
_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


class ValidationError(ValueError):
    """Raised when an input record has a missing or malformed field."""


def coerce_amount(value: Any, field: str = "amount") -> float:
    """Return ``value`` as a finite, non-negative float."""

    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is missing or not numeric: {value!r}")
    if isinstance(value, Decimal):
        value = float(value)
    if not isinstance(value, numbers.Real):
        raise ValidationError(f"{field} is not numeric: {value!r}")

    amount = float(value)
    if not math.isfinite(amount):
        raise ValidationError(f"{field} is not a finite number: {value!r}")
    if amount < 0:
        raise ValidationError(f"{field} must not be negative: {value!r}")
    return amount


def coerce_date(value: Any, field: str = "date") -> date:
    """Return the calendar date of ``value`` without any time-zone shift."""

    if isinstance(value, datetime):
        if pd.isna(value):
            raise ValidationError(f"{field} is missing")
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError as exc:
            raise ValidationError(f"{field} is not an ISO date: {value!r}") from exc
    raise ValidationError(f"{field} is missing or not a date: {value!r}")


def normalize_currency(code: str | None) -> str:
    """Return an upper-case ISO 4217 style code, defaulting to USD."""

    if code is None or (isinstance(code, str) and not code.strip()):
        return DEFAULT_CURRENCY
    if not isinstance(code, str):
        raise ValidationError(f"currency code must be a string: {code!r}")
    normalized = code.strip().upper()
    if not _CURRENCY_PATTERN.match(normalized):
        raise ValidationError(f"currency code is not a 3-letter code: {code!r}")
    return normalized


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is missing: {value!r}")
    return value.strip()


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return str(value)


def _coerce_invoice(record: InvoiceLike) -> Invoice:
    if isinstance(record, Invoice):
        fields: Mapping[str, Any] = vars(record)
    else:
        fields = record

    return Invoice(
        id=str(fields.get("id") or ""),
        status=_require_text(fields.get("status"), "status").lower(),
        total_amount=coerce_amount(fields.get("total_amount"), "total_amount"),
        issue_date=coerce_date(fields.get("issue_date"), "issue_date"),
        due_date=coerce_date(fields.get("due_date"), "due_date"),
        customer_id=_optional_text(fields.get("customer_id")),
        invoice_number=_optional_text(fields.get("invoice_number")),
    )


def _coerce_expense(record: ExpenseLike) -> Expense:
    if isinstance(record, Expense):
        fields: Mapping[str, Any] = vars(record)
    else:
        fields = record

    return Expense(
        amount=coerce_amount(fields.get("amount"), "amount"),
        category=_require_text(fields.get("category"), "category"),
        date=coerce_date(fields.get("date"), "date"),
        id=_optional_text(fields.get("id")),
        description=_optional_text(fields.get("description")) or "",
    )


def coerce_invoices(records: Iterable[InvoiceLike]) -> list[Invoice]:
    """Validate invoice records, failing on the first malformed one."""

    invoices: list[Invoice] = []
    for index, record in enumerate(records):
        try:
            invoices.append(_coerce_invoice(record))
        except ValidationError as exc:
            raise ValidationError(f"invoice #{index}: {exc}") from exc
    return invoices


def coerce_expenses(records: Iterable[ExpenseLike]) -> list[Expense]:
    """Validate expense records, failing on the first malformed one."""

    expenses: list[Expense] = []
    for index, record in enumerate(records):
        try:
            expenses.append(_coerce_expense(record))
        except ValidationError as exc:
            raise ValidationError(f"expense #{index}: {exc}") from exc
    return expenses
