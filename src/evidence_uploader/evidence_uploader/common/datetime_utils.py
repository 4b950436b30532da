from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def format_date(value: datetime) -> str:
    """YYYY-MM-DD"""
    return value.strftime("%Y-%m-%d")


def format_compact_time(value: datetime) -> str:
    """HHMMSS (no separators, safe inside branch names and paths)."""
    return value.strftime("%H%M%S")
