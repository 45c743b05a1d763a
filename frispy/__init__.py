"""Point-of-sale and stock tracking for a single fast-food counter."""

from .analytics import (
    best_sellers,
    daily_sales,
    format_currency,
    format_currency_compact,
    format_number,
    low_stock_items,
    monthly_sales,
    peak_hours,
    sales_by_day,
    weekly_sales,
)
from .app import AppState, initialize_app
from .config import PosConfig, load_config
from .dashboard import Dashboard, build_dashboard
from .db import PosStore
from .models import (
    InventoryItem,
    LineItem,
    MenuItem,
    Order,
    OrderStatus,
    SaleTransaction,
    StockStatus,
)
from .pos import Cart, checkout

__all__ = [
    "MenuItem",
    "LineItem",
    "SaleTransaction",
    "InventoryItem",
    "Order",
    "OrderStatus",
    "StockStatus",
    "daily_sales",
    "weekly_sales",
    "monthly_sales",
    "best_sellers",
    "sales_by_day",
    "peak_hours",
    "low_stock_items",
    "format_currency",
    "format_currency_compact",
    "format_number",
    "Dashboard",
    "build_dashboard",
    "Cart",
    "checkout",
    "PosStore",
    "AppState",
    "initialize_app",
    "PosConfig",
    "load_config",
]
