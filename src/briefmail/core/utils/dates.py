"""Date formatting for prompts, mastheads and subjects"""

from datetime import date, timedelta


def long_date(d: date) -> str:
    """'Monday, October 19, 2026'"""
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def cutoff_date(d: date, lookback_days: int) -> str:
    """'October 17, 2026' for a two-day lookback from October 19."""
    c = d - timedelta(days=lookback_days)
    return f"{c:%B} {c.day}, {c.year}"


def short_date(d: date) -> str:
    """'Oct 19, 2026'"""
    return f"{d:%b} {d.day}, {d.year}"
