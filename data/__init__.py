"""Demo and synthetic ledgers for Ledgerly."""

from .demo import DEMO_BUSINESS, demo_customer_names, demo_expenses, demo_invoices
from .synth import customers_frame, generate_synthetic_ledger, write_ledger_csv

__all__ = [
    "DEMO_BUSINESS",
    "customers_frame",
    "demo_customer_names",
    "demo_expenses",
    "demo_invoices",
    "generate_synthetic_ledger",
    "write_ledger_csv",
]
