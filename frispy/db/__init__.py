"""SQLite persistence for menu, inventory, sales and orders."""

from __future__ import annotations

import logging
from pathlib import Path

from ..models import SaleTransaction
from ..pos import CheckoutResult
from .inventory import InventoryDB
from .menu import MenuDB
from .orders import OrdersDB
from .sales import SalesDB
from .schema import ensure_schema
from .store import KeyValueStore

logger = logging.getLogger(__name__)


class PosStore:
    """One database file exposed as typed repositories per collection."""

    def __init__(self, db_path: str | Path = "~/.config/frispy/pos.db") -> None:
        self.kv = KeyValueStore(db_path)
        self.menu = MenuDB(self.kv)
        self.inventory = InventoryDB(self.kv)
        self.sales = SalesDB(self.kv)
        self.orders = OrdersDB(self.kv)

    def record_checkout(self, result: CheckoutResult) -> SaleTransaction:
        """Store a checkout on the order list and in the sale log."""
        self.orders.add_order(result.order)
        return self.sales.add_sale(result.sale)

    def clear_all(self) -> None:
        self.kv.remove(
            self.menu.key, self.inventory.key, self.sales.key, self.orders.key
        )
        logger.info("Cleared all stored collections")

    def close(self) -> None:
        self.kv.close()

    def __enter__(self) -> PosStore:
        return self

    def __exit__(self, *exc) -> None:
        self.close()


__all__ = [
    "PosStore",
    "KeyValueStore",
    "MenuDB",
    "InventoryDB",
    "SalesDB",
    "OrdersDB",
    "ensure_schema",
]
