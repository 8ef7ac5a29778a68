"""Application configuration utilities."""

from .logging_setup import configure_logging
from .settings import DEFAULT_BUSINESS_NAME, DEFAULT_CURRENCY, Settings, get_settings

__all__ = [
    "DEFAULT_BUSINESS_NAME",
    "DEFAULT_CURRENCY",
    "Settings",
    "configure_logging",
    "get_settings",
]
