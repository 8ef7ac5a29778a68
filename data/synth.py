"""Synthetic small-business ledger generator for Ledgerly.

Produces invoice and expense exports shaped like the database tables, for
development and testing. Each month gets a handful of client invoices with
realistic payment behaviour and a mix of recurring and ad-hoc expenses.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, TypeVar

import numpy as np
import pandas as pd

T = TypeVar("T")


INVOICE_FIELDS: Tuple[str, ...] = (
    "id",
    "invoice_number",
    "customer_id",
    "status",
    "issue_date",
    "due_date",
    "total_amount",
)

EXPENSE_FIELDS: Tuple[str, ...] = ("id", "date", "category", "description", "amount")

PAYMENT_TERMS_DAYS: Tuple[int, ...] = (14, 30, 30, 45)


@dataclass(frozen=True)
class CustomerProfile:
    """A client that is invoiced on a regular basis."""

    id: str
    name: str
    invoices_per_month: int
    amount_bounds: Tuple[float, float]


@dataclass(frozen=True)
class ExpenseProfile:
    """A supplier or spend pattern used in synthetic ledgers."""

    description: str
    category: str
    amount_bounds: Tuple[float, float]
    recurring: bool = False
    probability: float = 1.0


CUSTOMERS: Sequence[CustomerProfile] = (
    CustomerProfile("cust-1", "Acme Corp", 2, (800.0, 4200.0)),
    CustomerProfile("cust-2", "Globex Inc", 1, (1500.0, 6000.0)),
    CustomerProfile("cust-3", "Initech", 1, (400.0, 1800.0)),
)

EXPENSES: Sequence[ExpenseProfile] = (
    ExpenseProfile("Office Rent", "Rent", (1200.0, 1200.0), recurring=True),
    ExpenseProfile("Cloud Hosting", "Software", (120.0, 260.0), recurring=True),
    ExpenseProfile("Design Suite Licence", "Software", (55.0, 55.0), recurring=True),
    ExpenseProfile("Broadband", "Utilities", (60.0, 75.0), recurring=True),
    ExpenseProfile("Client Lunch", "Meals", (35.0, 140.0), probability=0.7),
    ExpenseProfile("Train Tickets", "Travel", (40.0, 320.0), probability=0.5),
    ExpenseProfile("Office Supplies", "Office", (15.0, 90.0), probability=0.6),
    ExpenseProfile("Contractor", "Contractors", (300.0, 1500.0), probability=0.35),
)


def generate_synthetic_ledger(
    months_full: int = 6,
    end_date: Optional[date | datetime | str] = None,
    include_current_partial: bool = True,
    seed: Optional[int] = None,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Generate invoice and expense frames covering the last ``months_full`` months.

    The current month up to ``end_date`` (today by default) is included when
    ``include_current_partial`` is set. Invoices issued more than their payment
    terms ago are mostly paid; a few are left overdue or cancelled.
    """

    if months_full <= 0:
        raise ValueError("months_full must be a positive integer")

    rng = np.random.default_rng(seed)
    end = _normalize_date(end_date) if end_date is not None else date.today()

    current_month_start = _month_floor(end)
    month_starts = [_add_months(current_month_start, -offset) for offset in range(months_full, 0, -1)]
    if include_current_partial:
        month_starts.append(current_month_start)

    invoices: List[dict] = []
    expenses: List[dict] = []
    for month_start in month_starts:
        last_day = min(_month_end(month_start), end)
        if last_day < month_start:
            continue
        for customer in CUSTOMERS:
            for _ in range(customer.invoices_per_month):
                invoices.append(_build_invoice(len(invoices) + 1, customer, month_start, last_day, end, rng))
        for profile in EXPENSES:
            if not profile.recurring and rng.random() > profile.probability:
                continue
            day = month_start if profile.recurring else _random_day(month_start, last_day, rng)
            expenses.append(
                {
                    "id": f"exp-{len(expenses) + 1}",
                    "date": day.isoformat(),
                    "category": profile.category,
                    "description": profile.description,
                    "amount": _round_amount(rng.uniform(*profile.amount_bounds)),
                }
            )

    invoice_df = pd.DataFrame.from_records(invoices, columns=INVOICE_FIELDS)
    expense_df = pd.DataFrame.from_records(expenses, columns=EXPENSE_FIELDS)
    invoice_df.sort_values("issue_date", inplace=True, kind="stable")
    expense_df.sort_values("date", inplace=True, kind="stable")
    invoice_df.reset_index(drop=True, inplace=True)
    expense_df.reset_index(drop=True, inplace=True)
    return invoice_df, expense_df


def write_ledger_csv(
    directory: str | Path,
    *,
    seed: Optional[int] = None,
    **kwargs,
) -> Tuple[Path, Path, Path]:
    """Generate synthetic data and persist ``invoices.csv``, ``expenses.csv`` and ``customers.csv``.

    Additional keyword arguments are forwarded to
    :func:`generate_synthetic_ledger`.
    """

    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    invoice_df, expense_df = generate_synthetic_ledger(seed=seed, **kwargs)
    invoices_path = target / "invoices.csv"
    expenses_path = target / "expenses.csv"
    customers_path = target / "customers.csv"
    invoice_df.to_csv(invoices_path, index=False)
    expense_df.to_csv(expenses_path, index=False)
    customers_frame().to_csv(customers_path, index=False)
    return invoices_path, expenses_path, customers_path


def customers_frame() -> pd.DataFrame:
    """Return the synthetic client list as a customers export."""

    return pd.DataFrame([{"id": customer.id, "name": customer.name} for customer in CUSTOMERS], columns=["id", "name"])


def _build_invoice(
    number: int,
    customer: CustomerProfile,
    month_start: date,
    last_day: date,
    today: date,
    rng: np.random.Generator,
) -> dict:
    issue_date = _random_day(month_start, last_day, rng)
    due_date = issue_date + timedelta(days=_rng_choice(PAYMENT_TERMS_DAYS, rng))
    return {
        "id": f"inv-{number}",
        "invoice_number": f"INV-{1000 + number}",
        "customer_id": customer.id,
        "status": _pick_status(issue_date, due_date, today, rng),
        "issue_date": issue_date.isoformat(),
        "due_date": due_date.isoformat(),
        "total_amount": _round_amount(rng.uniform(*customer.amount_bounds)),
    }


def _pick_status(issue_date: date, due_date: date, today: date, rng: np.random.Generator) -> str:
    roll = rng.random()
    if roll < 0.03:
        return "cancelled"
    if (today - issue_date).days < 3:
        return "draft" if roll < 0.5 else "sent"
    if due_date >= today:
        return "paid" if roll < 0.4 else "sent"
    return "paid" if roll < 0.85 else "overdue"


def _round_amount(value: float) -> float:
    return float(round(value, 2))


def _normalize_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value)
        return parsed.date()
    raise TypeError(f"Unsupported date value: {value!r}")


def _add_months(anchor: date, months: int) -> date:
    month = anchor.month - 1 + months
    year = anchor.year + month // 12
    month = month % 12 + 1
    day = min(anchor.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _month_floor(moment: date) -> date:
    return moment.replace(day=1)


def _month_end(month_start: date) -> date:
    return _add_months(month_start, 1) - timedelta(days=1)


def _random_day(start: date, end: date, rng: np.random.Generator) -> date:
    span = (end - start).days
    return start + timedelta(days=int(rng.integers(0, span + 1)))


def _rng_choice(options: Sequence[T], rng: np.random.Generator) -> T:
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    idx = int(rng.integers(0, len(options)))
    return options[idx]


if __name__ == "__main__":
    paths = write_ledger_csv(Path(__file__).resolve().parent, seed=7)
    print("Wrote", ", ".join(str(path) for path in paths))
