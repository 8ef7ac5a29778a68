"""Streamlit front end for Ledgerly."""

from .main import main

__all__ = ["main"]
