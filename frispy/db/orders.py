"""Order list storage and status updates."""

from __future__ import annotations

import logging

from ..errors import UnknownRecordError
from ..models import Order, OrderStatus
from ..orders import transition
from .store import JSONCollection

logger = logging.getLogger(__name__)


class OrdersDB(JSONCollection):
    """Manages the orders collection, newest order first."""

    key = "orders"

    def _from_dict(self, data: dict) -> Order:
        return Order.from_dict(data)

    def get_orders(self) -> list[Order]:
        return self._load()

    def add_order(self, order: Order) -> Order:
        self._save([order, *self._load()])
        logger.info("Added order %s (%s)", order.order_number, order.status.value)
        return order

    def update_status(self, order_id: str, status: OrderStatus | str) -> Order:
        """Move an order to a new status.

        Raises:
            UnknownRecordError: If no order has ``order_id``.
            InvalidTransitionError: If the workflow does not allow the move.
        """
        orders = self._load()
        for i, order in enumerate(orders):
            if order.id == order_id:
                orders[i] = transition(order, status)
                self._save(orders)
                logger.info(
                    "Order %s: %s -> %s",
                    order.order_number,
                    order.status.value,
                    orders[i].status.value,
                )
                return orders[i]
        raise UnknownRecordError(f"order {order_id!r} not found")

    def delete_order(self, order_id: str) -> None:
        orders = self._load()
        remaining = [o for o in orders if o.id != order_id]
        if len(remaining) == len(orders):
            raise UnknownRecordError(f"order {order_id!r} not found")
        self._save(remaining)
