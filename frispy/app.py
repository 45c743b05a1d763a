"""Application start-up state and first-run seeding."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from .db.sample_data import generate_sample_sales, sample_inventory, sample_menu_items

if TYPE_CHECKING:
    from .db import PosStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Created once at start-up and handed to whatever needs it."""

    initialized: bool = False
    refreshing: bool = False


def seed_sample_data(
    store: PosStore,
    now: datetime | None = None,
    days: int = 90,
    seed: int | None = None,
) -> int:
    """Overwrite menu, inventory and sales with sample data.

    Returns:
        Number of generated sales.
    """
    menu = sample_menu_items()
    store.menu.save_menu_items(menu)
    store.inventory.save_inventory(sample_inventory())
    sales = generate_sample_sales(menu, now=now, days=days, rng=random.Random(seed))
    store.sales.save_sales(sales)
    logger.info("Seeded %d sample sales over %d days", len(sales), days)
    return len(sales)


def initialize_app(
    state: AppState,
    store: PosStore,
    *,
    now: datetime | None = None,
    seed_days: int = 90,
    seed_enabled: bool = True,
    seed: int | None = None,
) -> AppState:
    """Seed sample data on first run and mark the app initialized."""
    if seed_enabled and not store.sales.get_sales():
        seed_sample_data(store, now=now, days=seed_days, seed=seed)
    state.initialized = True
    return state


@contextmanager
def refreshing(state: AppState) -> Iterator[AppState]:
    """Mark ``state`` as refreshing for the duration of a reload."""
    state.refreshing = True
    try:
        yield state
    finally:
        state.refreshing = False
