"""Sales analytics: pure functions over snapshots of the sale log and inventory."""

from .formatting import (
    format_currency,
    format_currency_compact,
    format_date,
    format_number,
    format_time,
)
from .menu import menu_categories, search_menu
from .rankings import (
    BestSeller,
    DayBucket,
    HourBucket,
    best_sellers,
    peak_hours,
    sales_by_day,
)
from .stock import (
    InventoryStats,
    inventory_stats,
    items_by_category,
    low_stock_items,
    stock_status,
)
from .windows import (
    WindowSummary,
    average_order_value,
    daily_sales,
    date_range,
    is_this_month,
    is_this_week,
    is_today,
    monthly_sales,
    sales_in_range,
    summarize_window,
    weekly_sales,
)

__all__ = [
    "is_today",
    "is_this_week",
    "is_this_month",
    "WindowSummary",
    "summarize_window",
    "daily_sales",
    "weekly_sales",
    "monthly_sales",
    "sales_in_range",
    "date_range",
    "average_order_value",
    "BestSeller",
    "DayBucket",
    "HourBucket",
    "best_sellers",
    "sales_by_day",
    "peak_hours",
    "InventoryStats",
    "stock_status",
    "low_stock_items",
    "items_by_category",
    "inventory_stats",
    "menu_categories",
    "search_menu",
    "format_currency",
    "format_currency_compact",
    "format_number",
    "format_date",
    "format_time",
]
