"""Formatting helpers for Ledgerly summaries."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from core.validation import normalize_currency

__all__ = ["currency_symbol", "format_currency", "format_percent"]


# Prefixes an en-US currency formatter uses for common codes; anything else is
# rendered as "<CODE> <amount>".
_SYMBOLS: Final[dict[str, str]] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
    "HKD": "HK$",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
}

_ZERO_DECIMAL: Final[frozenset[str]] = frozenset({"JPY", "KRW", "VND", "CLP", "ISK", "HUF"})


def currency_symbol(currency: str | None) -> str:
    """Return the display prefix used for ``currency``."""

    code = normalize_currency(currency)
    return _SYMBOLS.get(code, f"{code} ")


def format_currency(amount: float, currency: str | None = "USD") -> str:
    """Format ``amount`` the way an en-US currency formatter does.

    Exact halves round away from zero (``0.125`` -> ``$0.13``), so the amount is
    quantized as a decimal rather than through float formatting.
    """

    code = normalize_currency(currency)
    decimals = 0 if code in _ZERO_DECIMAL else 2
    quantized = Decimal(str(abs(amount))).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 and quantized != 0 else ""
    return f"{sign}{currency_symbol(code)}{quantized:,.{decimals}f}"


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"
