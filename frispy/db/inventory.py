"""Stock inventory CRUD operations."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace

from ..errors import UnknownRecordError
from ..models import InventoryItem
from .sample_data import sample_inventory
from .store import JSONCollection

logger = logging.getLogger(__name__)


class InventoryDB(JSONCollection):
    """Manages the inventory collection."""

    key = "inventory"

    def _from_dict(self, data: dict) -> InventoryItem:
        return InventoryItem.from_dict(data)

    def _default(self) -> list[InventoryItem]:
        return sample_inventory()

    def get_inventory(self) -> list[InventoryItem]:
        """Return the stored inventory, or the sample stock if none is stored."""
        return self._load()

    def save_inventory(self, items: list[InventoryItem]) -> None:
        self._save(items)

    def add_item(self, item: InventoryItem) -> InventoryItem:
        items = self._load()
        if not item.id:
            item = replace(item, id=uuid.uuid4().hex)
        items.append(item)
        self._save(items)
        logger.info("Added inventory item %s (%s)", item.id, item.name)
        return item

    def update_item(self, item_id: str, **updates) -> InventoryItem:
        items = self._load()
        for i, item in enumerate(items):
            if item.id == item_id:
                items[i] = replace(item, **updates)
                self._save(items)
                return items[i]
        raise UnknownRecordError(f"inventory item {item_id!r} not found")

    def update_quantity(self, item_id: str, quantity: int) -> InventoryItem:
        """Set the stock count. Negative values are clamped to zero."""
        return self.update_item(item_id, quantity=max(0, int(quantity)))

    def adjust_quantity(self, item_id: str, delta: int) -> InventoryItem:
        """Add ``delta`` (may be negative) to the stock count, stopping at zero."""
        items = self._load()
        for item in items:
            if item.id == item_id:
                return self.update_quantity(item_id, item.quantity + delta)
        raise UnknownRecordError(f"inventory item {item_id!r} not found")

    def delete_item(self, item_id: str) -> None:
        items = self._load()
        remaining = [i for i in items if i.id != item_id]
        if len(remaining) == len(items):
            raise UnknownRecordError(f"inventory item {item_id!r} not found")
        self._save(remaining)
