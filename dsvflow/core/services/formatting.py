"""Presentation helpers for money and dates."""

from datetime import date, datetime

DEFAULT_CURRENCY_SYMBOL = "GH₵"


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """``1234.5`` -> ``"GH₵ 1,234.50"``."""
    return f"{symbol} {amount:,.2f}"


def format_date(value: date | datetime) -> str:
    """``2026-10-19`` -> ``"19 Oct 2026"``."""
    return f"{value.day} {value:%b %Y}"
