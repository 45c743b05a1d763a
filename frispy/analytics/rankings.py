"""Best-seller ranking and day/hour buckets for the sales charts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..models import SaleTransaction
from .windows import resolve_now, to_local

HOURS_PER_DAY = 24


@dataclass
class BestSeller:
    id: str
    name: str
    image: str
    quantity: int = 0
    revenue: float = 0.0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "quantity": self.quantity,
            "revenue": self.revenue,
        }


@dataclass
class DayBucket:
    date: str  # local calendar date, YYYY-MM-DD
    total: float = 0.0
    count: int = 0

    def to_dict(self) -> dict:
        return {"date": self.date, "total": self.total, "count": self.count}


@dataclass
class HourBucket:
    hour: int  # local hour of day, 0-23
    count: int = 0
    total: float = 0.0

    def to_dict(self) -> dict:
        return {"hour": self.hour, "count": self.count, "total": self.total}


def best_sellers(
    sales: Iterable[SaleTransaction], limit: int | None = 5
) -> list[BestSeller]:
    """Rank menu items by units sold.

    Line items are grouped by id. Name and image come from the first line
    seen for an id. Ties on quantity keep first-seen order; revenue is
    reported but never used for ordering.

    Args:
        sales: Sale transactions to rank over.
        limit: Maximum number of entries, or ``None`` for all of them.
    """
    groups: dict[str, BestSeller] = {}
    for sale in sales:
        for item in sale.items:
            entry = groups.get(item.id)
            if entry is None:
                entry = BestSeller(id=item.id, name=item.name, image=item.image)
                groups[item.id] = entry
            entry.quantity += item.quantity
            entry.revenue += item.total

    ranked = sorted(groups.values(), key=lambda e: e.quantity, reverse=True)
    if limit is None:
        return ranked
    return ranked[:limit]


def sales_by_day(
    sales: Iterable[SaleTransaction],
    days: int = 7,
    now: datetime | None = None,
) -> list[DayBucket]:
    """Return one bucket per local calendar day, oldest first, ending today.

    Every day in the window is present even with no sales. Sales dated
    outside the window are ignored.
    """
    today = resolve_now(now).date()
    buckets: dict[str, DayBucket] = {}
    for offset in range(days - 1, -1, -1):
        key = (today - timedelta(days=offset)).isoformat()
        buckets[key] = DayBucket(date=key)

    for sale in sales:
        bucket = buckets.get(to_local(sale.timestamp).date().isoformat())
        if bucket is not None:
            bucket.total += sale.total
            bucket.count += 1

    return list(buckets.values())


def peak_hours(sales: Iterable[SaleTransaction]) -> list[HourBucket]:
    """Return all 24 hour-of-day buckets, busiest first.

    Hours with equal sale counts stay in ascending hour order.
    """
    buckets = [HourBucket(hour=h) for h in range(HOURS_PER_DAY)]
    for sale in sales:
        bucket = buckets[to_local(sale.timestamp).hour]
        bucket.count += 1
        bucket.total += sale.total

    return sorted(buckets, key=lambda b: b.count, reverse=True)
