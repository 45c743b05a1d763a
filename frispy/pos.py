"""Cart handling and checkout for the walk-up counter."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from .errors import EmptyCartError, UnknownMenuItemError
from .models import LineItem, MenuItem, Order, OrderStatus, SaleTransaction


@dataclass
class Cart:
    """Menu item id -> quantity, in the order items were first added."""

    quantities: dict[str, int] = field(default_factory=dict)

    def add(self, item_id: str, quantity: int = 1) -> None:
        if quantity <= 0:
            raise ValueError(f"quantity must be positive, got {quantity}")
        self.quantities[item_id] = self.quantities.get(item_id, 0) + quantity

    def remove(self, item_id: str) -> None:
        """Take one unit out; the entry disappears when it reaches zero."""
        current = self.quantities.get(item_id, 0)
        if current > 1:
            self.quantities[item_id] = current - 1
        else:
            self.quantities.pop(item_id, None)

    def clear(self) -> None:
        self.quantities.clear()

    @property
    def item_count(self) -> int:
        return sum(self.quantities.values())

    def __bool__(self) -> bool:
        return bool(self.quantities)


@dataclass(frozen=True)
class CheckoutResult:
    order: Order
    sale: SaleTransaction


def cart_line_items(cart: Cart, menu: Iterable[MenuItem]) -> list[LineItem]:
    """Snapshot each cart entry against the current menu."""
    by_id = {item.id: item for item in menu}
    lines: list[LineItem] = []
    for item_id, quantity in cart.quantities.items():
        menu_item = by_id.get(item_id)
        if menu_item is None:
            raise UnknownMenuItemError(f"menu item {item_id!r} not found")
        lines.append(LineItem.from_menu_item(menu_item, quantity))
    return lines


def _order_number(created: datetime) -> str:
    millis = str(int(created.timestamp() * 1000))
    return f"#{millis[-6:]}"


def checkout(
    cart: Cart,
    menu: Iterable[MenuItem],
    now: datetime | None = None,
) -> CheckoutResult:
    """Turn the cart into a completed order and its sale record.

    Counter sales skip the kitchen queue, so the order starts out
    ``completed``.

    Raises:
        EmptyCartError: If the cart has no items.
        UnknownMenuItemError: If the cart references a missing menu item.
    """
    if not cart:
        raise EmptyCartError("cart is empty")

    items = tuple(cart_line_items(cart, menu))
    total = round(sum(i.total for i in items), 2)
    created = (now or datetime.now()).astimezone()
    sale_id = uuid.uuid4().hex

    sale = SaleTransaction(id=sale_id, items=items, total=total, timestamp=created)
    order = Order(
        id=sale_id,
        order_number=_order_number(created),
        items=items,
        total=total,
        timestamp=created,
        status=OrderStatus.COMPLETED,
    )
    return CheckoutResult(order=order, sale=sale)
