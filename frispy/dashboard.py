"""Dashboard snapshot: every analytics figure the reporting views show."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from .analytics import (
    BestSeller,
    DayBucket,
    HourBucket,
    InventoryStats,
    WindowSummary,
    average_order_value,
    best_sellers,
    daily_sales,
    inventory_stats,
    low_stock_items,
    monthly_sales,
    peak_hours,
    sales_by_day,
    stock_status,
    weekly_sales,
)
from .analytics.windows import resolve_now
from .config import AnalyticsConfig
from .models import InventoryItem, SaleTransaction


@dataclass
class Dashboard:
    generated_at: datetime
    daily: WindowSummary
    weekly: WindowSummary
    monthly: WindowSummary
    best_sellers: list[BestSeller] = field(default_factory=list)
    daily_best_sellers: list[BestSeller] = field(default_factory=list)
    weekly_chart: list[DayBucket] = field(default_factory=list)
    monthly_chart: list[DayBucket] = field(default_factory=list)
    peak_hours: list[HourBucket] = field(default_factory=list)
    low_stock: list[InventoryItem] = field(default_factory=list)
    inventory: InventoryStats | None = None

    @property
    def daily_items_sold(self) -> int:
        return sum(b.quantity for b in self.daily_best_sellers)

    @property
    def daily_average(self) -> float:
        return average_order_value(self.daily)

    def to_dict(self) -> dict:
        return {
            "generatedAt": self.generated_at.isoformat(),
            "daily": {**self.daily.to_dict(), "average": self.daily_average},
            "weekly": self.weekly.to_dict(),
            "monthly": self.monthly.to_dict(),
            "dailyItemsSold": self.daily_items_sold,
            "bestSellers": [b.to_dict() for b in self.best_sellers],
            "dailyBestSellers": [b.to_dict() for b in self.daily_best_sellers],
            "weeklyChart": [d.to_dict() for d in self.weekly_chart],
            "monthlyChart": [d.to_dict() for d in self.monthly_chart],
            "peakHours": [h.to_dict() for h in self.peak_hours],
            "lowStock": [
                {**item.to_dict(), "status": stock_status(item).value}
                for item in self.low_stock
            ],
            "inventory": self.inventory.to_dict() if self.inventory else None,
        }


def build_dashboard(
    sales: Sequence[SaleTransaction],
    inventory: Sequence[InventoryItem],
    now: datetime | None = None,
    config: AnalyticsConfig | None = None,
) -> Dashboard:
    """Compute all dashboard figures from one snapshot of sales and stock.

    ``now`` is resolved once so every window agrees on the current time.
    """
    config = config or AnalyticsConfig()
    current = resolve_now(now)
    daily = daily_sales(sales, current)

    return Dashboard(
        generated_at=current,
        daily=daily,
        weekly=weekly_sales(sales, current),
        monthly=monthly_sales(sales, current),
        best_sellers=best_sellers(sales, config.best_sellers_limit),
        daily_best_sellers=best_sellers(daily.sales, config.best_sellers_limit),
        weekly_chart=sales_by_day(sales, config.weekly_chart_days, current),
        monthly_chart=sales_by_day(sales, config.monthly_chart_days, current),
        peak_hours=peak_hours(sales),
        low_stock=low_stock_items(inventory),
        inventory=inventory_stats(inventory),
    )
