"""Data models for menu, inventory, sales and orders.

The ``to_dict``/``from_dict`` pairs use the field names of the stored JSON
documents (``minQuantity``, ``orderNumber``), so records written by earlier
versions of the register load unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from .errors import MalformedRecordError


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StockStatus(str, Enum):
    CRITICAL = "critical"
    LOW = "low"
    IN_STOCK = "inStock"


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp.

    Accepts the ``...Z`` form written by the store, explicit offsets, and
    naive strings (taken as local time).

    Raises:
        MalformedRecordError: If the value is not a valid timestamp.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        raise MalformedRecordError(f"invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedRecordError(f"invalid timestamp: {value!r}") from e


def format_timestamp(ts: datetime) -> str:
    """Serialize a datetime as a UTC ISO string with millisecond precision."""
    utc = ts.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def _require_mapping(data: Any, kind: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedRecordError(
            f"{kind} record must be an object, got {type(data).__name__}"
        )
    return data


def _require(data: dict[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError) as e:
        raise MalformedRecordError(f"{kind} record is missing {key!r}") from e


@dataclass
class MenuItem:
    id: str
    name: str
    price: float
    category: str = ""
    image: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MenuItem:
        data = _require_mapping(data, "menu item")
        return cls(
            id=str(_require(data, "id", "menu item")),
            name=data.get("name", ""),
            price=float(data.get("price", 0)),
            category=data.get("category", ""),
            image=data.get("image", ""),
        )


@dataclass(frozen=True)
class LineItem:
    """A menu item as it was sold: copied, never a live reference."""

    id: str
    name: str
    price: float
    quantity: int
    total: float
    image: str = ""

    @classmethod
    def from_menu_item(cls, item: MenuItem, quantity: int) -> LineItem:
        if quantity <= 0:
            raise ValueError(f"quantity must be positive, got {quantity}")
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            quantity=quantity,
            total=item.price * quantity,
            image=item.image,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "price": self.price,
            "quantity": self.quantity,
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LineItem:
        data = _require_mapping(data, "line item")
        price = float(data.get("price", 0))
        quantity = int(_require(data, "quantity", "line item"))
        if quantity <= 0:
            raise MalformedRecordError(f"line item quantity must be positive, got {quantity}")
        return cls(
            id=str(_require(data, "id", "line item")),
            name=data.get("name", ""),
            price=price,
            quantity=quantity,
            total=float(data.get("total", price * quantity)),
            image=data.get("image", ""),
        )


def _items_from_dicts(data: dict[str, Any], kind: str) -> tuple[LineItem, ...]:
    raw_items = _require(data, "items", kind)
    if not isinstance(raw_items, list):
        raise MalformedRecordError(f"{kind} items must be a list")
    return tuple(LineItem.from_dict(i) for i in raw_items)


@dataclass(frozen=True)
class SaleTransaction:
    id: str
    items: tuple[LineItem, ...]
    total: float
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "items": [i.to_dict() for i in self.items],
            "total": self.total,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SaleTransaction:
        data = _require_mapping(data, "sale")
        return cls(
            id=str(_require(data, "id", "sale")),
            items=_items_from_dicts(data, "sale"),
            total=float(_require(data, "total", "sale")),
            timestamp=parse_timestamp(_require(data, "timestamp", "sale")),
        )


@dataclass
class Order:
    """A sale plus the kitchen workflow status shown on the orders list."""

    id: str
    order_number: str
    items: tuple[LineItem, ...]
    total: float
    timestamp: datetime
    status: OrderStatus = OrderStatus.COMPLETED

    def as_sale(self) -> SaleTransaction:
        return SaleTransaction(
            id=self.id, items=self.items, total=self.total, timestamp=self.timestamp
        )

    def with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "orderNumber": self.order_number,
            "items": [i.to_dict() for i in self.items],
            "total": self.total,
            "status": self.status.value,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Order:
        data = _require_mapping(data, "order")
        raw_status = data.get("status", OrderStatus.COMPLETED.value)
        try:
            status = OrderStatus(raw_status)
        except ValueError as e:
            raise MalformedRecordError(f"unknown order status: {raw_status!r}") from e
        order_id = str(_require(data, "id", "order"))
        return cls(
            id=order_id,
            order_number=data.get("orderNumber", f"#{order_id[-6:]}"),
            items=_items_from_dicts(data, "order"),
            total=float(_require(data, "total", "order")),
            timestamp=parse_timestamp(_require(data, "timestamp", "order")),
            status=status,
        )


@dataclass
class InventoryItem:
    id: str
    name: str
    quantity: int
    min_quantity: int
    unit: str = "pcs"
    category: str = ""
    supplier: str = ""
    price: float = 0.0

    def __post_init__(self) -> None:
        # Stock counts never go negative.
        if self.quantity < 0:
            self.quantity = 0

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "minQuantity": self.min_quantity,
            "unit": self.unit,
            "category": self.category,
            "supplier": self.supplier,
        }
        if self.price:
            data["price"] = self.price
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InventoryItem:
        data = _require_mapping(data, "inventory item")
        return cls(
            id=str(_require(data, "id", "inventory item")),
            name=data.get("name", ""),
            quantity=int(data.get("quantity", 0)),
            min_quantity=int(data.get("minQuantity", 0)),
            unit=data.get("unit", "pcs"),
            category=data.get("category", ""),
            supplier=data.get("supplier", ""),
            price=float(data.get("price", 0)),
        )
