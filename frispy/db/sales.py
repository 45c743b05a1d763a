"""Append-only sale log storage."""

from __future__ import annotations

import logging

from ..errors import UnknownRecordError
from ..models import SaleTransaction
from .store import JSONCollection

logger = logging.getLogger(__name__)


class SalesDB(JSONCollection):
    """Manages the sales collection."""

    key = "sales"

    def _from_dict(self, data: dict) -> SaleTransaction:
        return SaleTransaction.from_dict(data)

    def get_sales(self) -> list[SaleTransaction]:
        """Return the full sale history in the order it was recorded."""
        return self._load()

    def save_sales(self, sales: list[SaleTransaction]) -> None:
        self._save(sales)

    def add_sale(self, sale: SaleTransaction) -> SaleTransaction:
        sales = self._load()
        sales.append(sale)
        self._save(sales)
        logger.info("Recorded sale %s: %.2f", sale.id, sale.total)
        return sale

    def delete_sale(self, sale_id: str) -> None:
        sales = self._load()
        remaining = [s for s in sales if s.id != sale_id]
        if len(remaining) == len(sales):
            raise UnknownRecordError(f"sale {sale_id!r} not found")
        self._save(remaining)
        logger.info("Deleted sale %s", sale_id)
