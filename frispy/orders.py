"""Order status workflow: pending -> preparing -> completed, or cancelled."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .analytics.windows import is_today
from .errors import InvalidTransitionError
from .models import Order, OrderStatus

_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def is_terminal(status: OrderStatus) -> bool:
    return not _TRANSITIONS[status]


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in _TRANSITIONS[current]


def transition(order: Order, target: OrderStatus | str) -> Order:
    """Return a copy of ``order`` moved to ``target``.

    Raises:
        InvalidTransitionError: If the move is not allowed, including any
            move out of ``completed`` or ``cancelled``.
    """
    try:
        target = OrderStatus(target)
    except ValueError as e:
        raise InvalidTransitionError(f"unknown order status: {target!r}") from e
    if not can_transition(order.status, target):
        raise InvalidTransitionError(
            f"order {order.order_number} cannot go from "
            f"{order.status.value} to {target.value}"
        )
    return order.with_status(target)


def orders_by_status(orders: Iterable[Order], status: OrderStatus | str) -> list[Order]:
    status = OrderStatus(status)
    return [o for o in orders if o.status is status]


def todays_orders(orders: Iterable[Order], now: datetime | None = None) -> list[Order]:
    return [o for o in orders if is_today(o.timestamp, now)]
