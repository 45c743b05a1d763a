"""Menu catalog CRUD operations."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace

from ..errors import UnknownRecordError
from ..models import MenuItem
from .sample_data import sample_menu_items
from .store import JSONCollection

logger = logging.getLogger(__name__)


class MenuDB(JSONCollection):
    """Manages the menu_items collection."""

    key = "menu_items"

    def _from_dict(self, data: dict) -> MenuItem:
        return MenuItem.from_dict(data)

    def _default(self) -> list[MenuItem]:
        return sample_menu_items()

    def get_menu_items(self) -> list[MenuItem]:
        """Return the stored menu, or the sample menu if none is stored."""
        return self._load()

    def save_menu_items(self, items: list[MenuItem]) -> None:
        self._save(items)

    def add_item(self, item: MenuItem) -> MenuItem:
        """Append a menu item, assigning an id if it has none."""
        items = self._load()
        if not item.id:
            item = replace(item, id=uuid.uuid4().hex)
        items.append(item)
        self._save(items)
        logger.info("Added menu item %s (%s)", item.id, item.name)
        return item

    def update_item(self, item_id: str, **updates) -> MenuItem:
        items = self._load()
        for i, item in enumerate(items):
            if item.id == item_id:
                items[i] = replace(item, **updates)
                self._save(items)
                return items[i]
        raise UnknownRecordError(f"menu item {item_id!r} not found")

    def delete_item(self, item_id: str) -> None:
        items = self._load()
        remaining = [i for i in items if i.id != item_id]
        if len(remaining) == len(items):
            raise UnknownRecordError(f"menu item {item_id!r} not found")
        self._save(remaining)
