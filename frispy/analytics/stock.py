"""Stock level tiers and inventory summaries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..models import InventoryItem, StockStatus

# Items at or below half their reorder threshold are critical.
CRITICAL_RATIO = 0.5


def stock_status(item: InventoryItem) -> StockStatus:
    if item.quantity <= item.min_quantity * CRITICAL_RATIO:
        return StockStatus.CRITICAL
    if item.quantity <= item.min_quantity:
        return StockStatus.LOW
    return StockStatus.IN_STOCK


def low_stock_items(inventory: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Return items at or below their reorder threshold, in input order."""
    return [item for item in inventory if item.quantity <= item.min_quantity]


def items_by_category(items, category: str) -> list:
    """Filter menu or inventory items by category name."""
    return [item for item in items if item.category == category]


@dataclass(frozen=True)
class InventoryStats:
    total_items: int
    low_stock_count: int
    in_stock_count: int
    total_value: float

    def to_dict(self) -> dict:
        return {
            "totalItems": self.total_items,
            "lowStockCount": self.low_stock_count,
            "inStockCount": self.in_stock_count,
            "totalValue": self.total_value,
        }


def inventory_stats(inventory: Iterable[InventoryItem]) -> InventoryStats:
    items = list(inventory)
    low = low_stock_items(items)
    return InventoryStats(
        total_items=len(items),
        low_stock_count=len(low),
        in_stock_count=len(items) - len(low),
        total_value=sum(item.quantity * item.price for item in items),
    )
