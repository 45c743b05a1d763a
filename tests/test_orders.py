"""Tests for the order status workflow."""

from datetime import datetime, timedelta

import pytest

from frispy.errors import InvalidTransitionError
from frispy.models import Order, OrderStatus
from frispy.orders import (
    can_transition,
    is_terminal,
    orders_by_status,
    todays_orders,
    transition,
)

NOW = datetime(2026, 10, 15, 14, 30).astimezone()


def _order(status: OrderStatus, order_id: str = "1", ts: datetime = NOW) -> Order:
    return Order(
        id=order_id,
        order_number=f"#{order_id:0>6}",
        items=(),
        total=0.0,
        timestamp=ts,
        status=status,
    )


@pytest.mark.parametrize(
    "current, target",
    [
        (OrderStatus.PENDING, OrderStatus.PREPARING),
        (OrderStatus.PREPARING, OrderStatus.COMPLETED),
        (OrderStatus.PENDING, OrderStatus.CANCELLED),
        (OrderStatus.PREPARING, OrderStatus.CANCELLED),
    ],
)
def test_allowed_transitions(current, target):
    order = _order(current)
    moved = transition(order, target)
    assert moved.status is target
    # original is left untouched
    assert order.status is current


@pytest.mark.parametrize(
    "current, target",
    [
        (OrderStatus.PENDING, OrderStatus.COMPLETED),
        (OrderStatus.PREPARING, OrderStatus.PENDING),
        (OrderStatus.COMPLETED, OrderStatus.CANCELLED),
        (OrderStatus.COMPLETED, OrderStatus.PENDING),
        (OrderStatus.CANCELLED, OrderStatus.PREPARING),
        (OrderStatus.PENDING, OrderStatus.PENDING),
    ],
)
def test_rejected_transitions(current, target):
    with pytest.raises(InvalidTransitionError):
        transition(_order(current), target)


def test_transition_accepts_strings():
    assert transition(_order(OrderStatus.PENDING), "preparing").status is OrderStatus.PREPARING


def test_transition_unknown_status():
    with pytest.raises(InvalidTransitionError, match="unknown"):
        transition(_order(OrderStatus.PENDING), "served")


def test_terminal_states():
    assert is_terminal(OrderStatus.COMPLETED)
    assert is_terminal(OrderStatus.CANCELLED)
    assert not is_terminal(OrderStatus.PENDING)
    assert not can_transition(OrderStatus.CANCELLED, OrderStatus.COMPLETED)


def test_orders_by_status():
    orders = [
        _order(OrderStatus.PENDING, "1"),
        _order(OrderStatus.COMPLETED, "2"),
        _order(OrderStatus.PENDING, "3"),
    ]
    assert [o.id for o in orders_by_status(orders, "pending")] == ["1", "3"]


def test_todays_orders():
    orders = [
        _order(OrderStatus.COMPLETED, "1", NOW - timedelta(hours=2)),
        _order(OrderStatus.COMPLETED, "2", NOW - timedelta(days=1)),
    ]
    assert [o.id for o in todays_orders(orders, NOW)] == ["1"]
