"""Time windows over the sale log and per-window totals.

The three dashboard windows are deliberately not of the same kind:
"today" and "this month" are local calendar periods, while "this week" is a
rolling 7 x 24h span ending at ``now``. Dashboards depend on these exact
boundaries, so they are kept as-is.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..models import SaleTransaction

WEEK = timedelta(days=7)


def to_local(ts: datetime) -> datetime:
    """Return ``ts`` as an aware datetime in the local timezone.

    Naive datetimes are interpreted as local time.
    """
    return ts.astimezone()


def resolve_now(now: datetime | None) -> datetime:
    return to_local(now if now is not None else datetime.now())


def is_today(ts: datetime, now: datetime | None = None) -> bool:
    return to_local(ts).date() == resolve_now(now).date()


def is_this_week(ts: datetime, now: datetime | None = None) -> bool:
    current = resolve_now(now)
    return current - WEEK <= to_local(ts) <= current


def is_this_month(ts: datetime, now: datetime | None = None) -> bool:
    local = to_local(ts)
    current = resolve_now(now)
    return local.year == current.year and local.month == current.month


@dataclass(frozen=True)
class WindowSummary:
    total: float
    count: int
    sales: tuple[SaleTransaction, ...]

    def to_dict(self) -> dict:
        return {"total": self.total, "count": self.count}


def summarize_window(
    sales: Iterable[SaleTransaction],
    predicate: Callable[[datetime], bool],
) -> WindowSummary:
    """Filter ``sales`` by timestamp and total the matches in input order."""
    matched: list[SaleTransaction] = []
    total = 0.0
    for sale in sales:
        if predicate(sale.timestamp):
            matched.append(sale)
            total += sale.total
    return WindowSummary(total=total, count=len(matched), sales=tuple(matched))


def daily_sales(
    sales: Iterable[SaleTransaction], now: datetime | None = None
) -> WindowSummary:
    current = resolve_now(now)
    return summarize_window(sales, lambda ts: is_today(ts, current))


def weekly_sales(
    sales: Iterable[SaleTransaction], now: datetime | None = None
) -> WindowSummary:
    current = resolve_now(now)
    return summarize_window(sales, lambda ts: is_this_week(ts, current))


def monthly_sales(
    sales: Iterable[SaleTransaction], now: datetime | None = None
) -> WindowSummary:
    current = resolve_now(now)
    return summarize_window(sales, lambda ts: is_this_month(ts, current))


def sales_in_range(
    sales: Iterable[SaleTransaction], start: datetime, end: datetime
) -> list[SaleTransaction]:
    """Return sales with ``start <= timestamp <= end``, in input order."""
    lo, hi = to_local(start), to_local(end)
    return [s for s in sales if lo <= to_local(s.timestamp) <= hi]


def date_range(days: int, now: datetime | None = None) -> tuple[datetime, datetime]:
    """Return ``(now - days, now)``."""
    end = resolve_now(now)
    return end - timedelta(days=days), end


def average_order_value(summary: WindowSummary) -> float:
    if summary.count == 0:
        return 0.0
    return summary.total / summary.count
