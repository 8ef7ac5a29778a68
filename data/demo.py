"""Demo business ledger shown when no real exports are configured."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Optional

from core.models import BusinessContext

__all__ = ["DEMO_BUSINESS", "DEMO_CUSTOMERS", "demo_customer_names", "demo_expenses", "demo_invoices"]

DEMO_BUSINESS = BusinessContext(name="Demo Corp (Oak)", currency="USD", id="demo-business-id")

DEMO_CUSTOMERS: tuple[dict[str, str], ...] = (
    {"id": "cust-1", "name": "Acme Corp", "email": "contact@acme.com"},
    {"id": "cust-2", "name": "Globex Inc", "email": "info@globex.com"},
)


def demo_customer_names() -> dict[str, str]:
    return {customer["id"]: customer["name"] for customer in DEMO_CUSTOMERS}


def demo_invoices(today: Optional[date] = None) -> list[dict[str, Any]]:
    """Return demo invoice rows dated relative to ``today``."""

    today = today or date.today()
    return [
        {
            "id": "inv-1",
            "invoice_number": "INV-1001",
            "customer_id": "cust-1",
            "status": "paid",
            "issue_date": today.isoformat(),
            "due_date": today.isoformat(),
            "total_amount": 5000.00,
        },
        {
            "id": "inv-2",
            "invoice_number": "INV-1002",
            "customer_id": "cust-2",
            "status": "sent",
            "issue_date": today.isoformat(),
            "due_date": (today + timedelta(days=7)).isoformat(),
            "total_amount": 2500.00,
        },
    ]


def demo_expenses(today: Optional[date] = None) -> list[dict[str, Any]]:
    """Return demo expense rows dated ``today``."""

    today = today or date.today()
    return [
        {"id": "exp-1", "description": "Hosting", "amount": 150.00, "category": "Software", "date": today.isoformat()},
        {"id": "exp-2", "description": "Office Supplies", "amount": 45.50, "category": "Office", "date": today.isoformat()},
        {"id": "exp-3", "description": "Client Lunch", "amount": 85.00, "category": "Meals", "date": today.isoformat()},
    ]
