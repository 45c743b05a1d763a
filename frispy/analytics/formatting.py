"""Display formatting for money, counts, dates and times.

Output is fixed to the en-US layout regardless of the process locale.
"""

from __future__ import annotations

from datetime import datetime

from ..models import parse_timestamp
from .windows import to_local

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

BILLION = 1_000_000_000
MILLION = 1_000_000
THOUSAND = 1_000
# Compact currency keeps full precision up to this amount.
CURRENCY_COMPACT_THRESHOLD = 10_000


def format_currency(amount: float, symbol: str = "$") -> str:
    return f"{symbol}{amount:.2f}"


def format_currency_compact(amount: float, symbol: str = "$") -> str:
    """Format money with k/M/B suffixes for large amounts.

    >>> format_currency_compact(9999.99)
    '$9999.99'
    >>> format_currency_compact(10000)
    '$10.0k'
    """
    if amount >= BILLION:
        return f"{symbol}{amount / BILLION:.1f}B"
    if amount >= MILLION:
        return f"{symbol}{amount / MILLION:.1f}M"
    if amount >= CURRENCY_COMPACT_THRESHOLD:
        return f"{symbol}{amount / THOUSAND:.1f}k"
    return format_currency(amount, symbol)


def format_number(num: float) -> str:
    """Abbreviate counts: 1500 -> '1.5k', 2000000 -> '2.0M'."""
    if num >= BILLION:
        return f"{num / BILLION:.1f}B"
    if num >= MILLION:
        return f"{num / MILLION:.1f}M"
    if num >= THOUSAND:
        return f"{num / THOUSAND:.1f}k"
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def _as_local(value: str | datetime) -> datetime:
    return to_local(parse_timestamp(value))


def format_date(value: str | datetime) -> str:
    """'Oct 17, 2026'"""
    dt = _as_local(value)
    return f"{_MONTH_ABBR[dt.month - 1]} {dt.day}, {dt.year}"


def format_time(value: str | datetime) -> str:
    """'02:30 PM'"""
    dt = _as_local(value)
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour:02d}:{dt.minute:02d} {suffix}"
