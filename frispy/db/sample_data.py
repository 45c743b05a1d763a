"""Sample menu, inventory and sales used to seed a fresh register."""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from ..models import InventoryItem, LineItem, MenuItem, SaleTransaction

SAMPLE_MENU_ITEMS: list[dict] = [
    # Snacks / chicken
    {"id": "1", "name": "FRISPY Chicken FRY", "price": 90, "category": "Chicken", "image": "🍗"},
    {"id": "2", "name": "FRISPY French FRY", "price": 70, "category": "Sides", "image": "🍟"},
    {"id": "3", "name": "FRISPY Meat BOX", "price": 110, "category": "Chicken", "image": "🍱"},
    {"id": "4", "name": "Fried Chicken MOMO", "price": 130, "category": "Chicken", "image": "🥟"},
    {"id": "5", "name": "Fried Chicken NAGA", "price": 140, "category": "Chicken", "image": "🥟"},
    {"id": "6", "name": "Fried Chicken BBQ", "price": 150, "category": "Chicken", "image": "🥟"},
    {"id": "7", "name": "Steamed Chicken MOMO", "price": 130, "category": "Chicken", "image": "🥟"},
    {"id": "8", "name": "Steamed Chicken NAGA", "price": 140, "category": "Chicken", "image": "🥟"},
    {"id": "9", "name": "Steamed Chicken BBQ", "price": 150, "category": "Chicken", "image": "🥟"},
    {"id": "10", "name": "FRISPY Chipsy", "price": 120, "category": "Sides", "image": "🥔"},
    {"id": "11", "name": "FRISPY Chicken Cutlet", "price": 190, "category": "Chicken", "image": "🍗"},
    {"id": "12", "name": "FRISPY Grill Chicken PASTA", "price": 150, "category": "Chicken", "image": "🍝"},
    {"id": "13", "name": "FRISPY WAFFLE", "price": 150, "category": "Sides", "image": "🧇"},
    {"id": "14", "name": "FRISPY BUFFALO WINGS", "price": 140, "category": "Chicken", "image": "🍗"},
    {"id": "15", "name": "BUFFALO WINGS NAGA", "price": 140, "category": "Chicken", "image": "🍗"},
    {"id": "16", "name": "BUFFALO WINGS BBQ", "price": 160, "category": "Chicken", "image": "🍗"},
    # Drinks
    {"id": "17", "name": "FRISPY COLD COFFEE", "price": 100, "category": "Beverages", "image": "☕"},
    {"id": "18", "name": "FRISPY FIZZY LEMON", "price": 100, "category": "Beverages", "image": "🍋"},
    {"id": "19", "name": "FRISPY BLUE OCEAN", "price": 110, "category": "Beverages", "image": "🥤"},
]

SAMPLE_INVENTORY: list[dict] = [
    {"id": "1", "name": "Burger Buns", "quantity": 150, "minQuantity": 50, "unit": "pcs", "category": "Bakery", "supplier": "Local Bakery"},
    {"id": "2", "name": "Beef Patties", "quantity": 100, "minQuantity": 30, "unit": "pcs", "category": "Meat", "supplier": "Meat Supplier Co"},
    {"id": "3", "name": "Chicken Patties", "quantity": 80, "minQuantity": 30, "unit": "pcs", "category": "Meat", "supplier": "Meat Supplier Co"},
    {"id": "4", "name": "Cheese Slices", "quantity": 200, "minQuantity": 50, "unit": "pcs", "category": "Dairy", "supplier": "Dairy Fresh"},
    {"id": "5", "name": "Lettuce", "quantity": 20, "minQuantity": 10, "unit": "kg", "category": "Vegetables", "supplier": "Farm Fresh"},
    {"id": "6", "name": "Tomatoes", "quantity": 15, "minQuantity": 10, "unit": "kg", "category": "Vegetables", "supplier": "Farm Fresh"},
    {"id": "7", "name": "Onions", "quantity": 12, "minQuantity": 8, "unit": "kg", "category": "Vegetables", "supplier": "Farm Fresh"},
    {"id": "8", "name": "Frozen Fries", "quantity": 50, "minQuantity": 20, "unit": "kg", "category": "Frozen", "supplier": "Frozen Foods Inc"},
    {"id": "9", "name": "Coke Syrup", "quantity": 8, "minQuantity": 3, "unit": "boxes", "category": "Beverages", "supplier": "Beverage Distributor"},
    {"id": "10", "name": "Sprite Syrup", "quantity": 6, "minQuantity": 3, "unit": "boxes", "category": "Beverages", "supplier": "Beverage Distributor"},
    {"id": "11", "name": "Cups Small", "quantity": 300, "minQuantity": 100, "unit": "pcs", "category": "Packaging", "supplier": "Pack Pro"},
    {"id": "12", "name": "Cups Large", "quantity": 250, "minQuantity": 100, "unit": "pcs", "category": "Packaging", "supplier": "Pack Pro"},
    {"id": "13", "name": "Burger Boxes", "quantity": 200, "minQuantity": 75, "unit": "pcs", "category": "Packaging", "supplier": "Pack Pro"},
    {"id": "14", "name": "Napkins", "quantity": 500, "minQuantity": 150, "unit": "pcs", "category": "Packaging", "supplier": "Pack Pro"},
]


def sample_menu_items() -> list[MenuItem]:
    return [MenuItem.from_dict(d) for d in SAMPLE_MENU_ITEMS]


def sample_inventory() -> list[InventoryItem]:
    return [InventoryItem.from_dict(d) for d in SAMPLE_INVENTORY]


def generate_sample_sales(
    menu: list[MenuItem],
    now: datetime | None = None,
    days: int = 90,
    rng: random.Random | None = None,
) -> list[SaleTransaction]:
    """Generate a plausible sale history ending at ``now``.

    Each day gets 10-29 sales placed one minute apart from the current
    time of day, with 1-3 lines of 1-3 units each. Pass a seeded ``rng``
    for a reproducible history.
    """
    if not menu:
        return []
    rng = rng or random.Random()
    current = (now or datetime.now()).astimezone()

    sales: list[SaleTransaction] = []
    for day in range(days):
        day_start = current - timedelta(days=day)
        for n in range(rng.randint(10, 29)):
            items = tuple(
                LineItem.from_menu_item(rng.choice(menu), rng.randint(1, 3))
                for _ in range(rng.randint(1, 3))
            )
            sales.append(
                SaleTransaction(
                    id=f"sale_{day}_{n}",
                    items=items,
                    total=round(sum(i.total for i in items), 2),
                    timestamp=day_start + timedelta(minutes=n),
                )
            )
    return sales
