"""Tests for time windows and per-window totals."""

from datetime import datetime, timedelta, timezone

import pytest

from frispy.analytics.windows import (
    average_order_value,
    daily_sales,
    date_range,
    is_this_month,
    is_this_week,
    is_today,
    monthly_sales,
    sales_in_range,
    summarize_window,
    weekly_sales,
)
from frispy.models import LineItem, SaleTransaction


def _local(year, month, day, hour=12, minute=0) -> datetime:
    return datetime(year, month, day, hour, minute).astimezone()


NOW = _local(2026, 10, 15, 14, 30)


def _sale(sale_id: str, ts: datetime, total: float = 10.0) -> SaleTransaction:
    item = LineItem(id="1", name="Fry", price=total, quantity=1, total=total)
    return SaleTransaction(id=sale_id, items=(item,), total=total, timestamp=ts)


@pytest.fixture
def sales():
    return [
        _sale("today", _local(2026, 10, 15, 9), 12.5),
        _sale("three_days", _local(2026, 10, 12, 18), 20.0),
        _sale("this_month", _local(2026, 10, 2, 11), 7.25),
        _sale("last_month", _local(2026, 9, 20, 11), 100.0),
        _sale("last_year", _local(2025, 10, 15, 11), 50.0),
    ]


class TestPredicates:
    def test_is_today_same_calendar_day(self):
        assert is_today(_local(2026, 10, 15, 0, 1), NOW)
        assert is_today(_local(2026, 10, 15, 23, 59), NOW)
        assert not is_today(_local(2026, 10, 14, 23, 59), NOW)

    def test_is_today_ignores_other_years(self):
        assert not is_today(_local(2025, 10, 15, 14), NOW)

    def test_is_this_week_is_rolling(self):
        assert is_this_week(NOW - timedelta(days=6, hours=23), NOW)
        assert not is_this_week(NOW - timedelta(days=7, seconds=1), NOW)

    def test_is_this_week_inclusive_bounds(self):
        assert is_this_week(NOW - timedelta(days=7), NOW)
        assert is_this_week(NOW, NOW)

    def test_is_this_week_excludes_future(self):
        assert not is_this_week(NOW + timedelta(seconds=1), NOW)

    def test_is_this_month_calendar_month(self):
        assert is_this_month(_local(2026, 10, 1, 0, 5), NOW)
        assert not is_this_month(_local(2026, 9, 30, 23), NOW)
        assert not is_this_month(_local(2025, 10, 15), NOW)

    def test_utc_timestamps_compare_by_instant(self):
        ts = NOW.astimezone(timezone.utc)
        assert is_this_week(ts, NOW)
        assert is_today(ts, NOW)

    def test_naive_timestamps_are_local(self):
        assert is_today(datetime(2026, 10, 15, 8), NOW)


class TestSummaries:
    def test_daily(self, sales):
        summary = daily_sales(sales, NOW)
        assert summary.count == 1
        assert summary.total == 12.5
        assert [s.id for s in summary.sales] == ["today"]

    def test_weekly(self, sales):
        summary = weekly_sales(sales, NOW)
        assert [s.id for s in summary.sales] == ["today", "three_days"]
        assert summary.total == 32.5

    def test_monthly(self, sales):
        summary = monthly_sales(sales, NOW)
        assert [s.id for s in summary.sales] == ["today", "three_days", "this_month"]
        assert summary.total == 39.75
        assert summary.count == 3

    def test_windows_nest_away_from_boundaries(self, sales):
        daily = daily_sales(sales, NOW)
        weekly = weekly_sales(sales, NOW)
        monthly = monthly_sales(sales, NOW)
        assert daily.total <= weekly.total <= monthly.total

    def test_later_today_counts_for_today_but_not_week(self):
        """A sale stamped later today is not yet inside the rolling week."""
        later = [_sale("later", _local(2026, 10, 15, 22))]
        assert daily_sales(later, NOW).count == 1
        assert weekly_sales(later, NOW).count == 0

    def test_week_can_reach_into_previous_month(self):
        """Early in a month the rolling week covers days the month excludes."""
        now = _local(2026, 10, 2, 9)
        sales = [_sale("sep", _local(2026, 9, 29, 12), 40.0)]
        assert weekly_sales(sales, now).total == 40.0
        assert monthly_sales(sales, now).total == 0.0

    def test_empty(self):
        for fn in (daily_sales, weekly_sales, monthly_sales):
            summary = fn([], NOW)
            assert summary.total == 0
            assert summary.count == 0
            assert summary.sales == ()

    def test_summarize_window_custom_predicate(self, sales):
        summary = summarize_window(sales, lambda ts: ts.year == 2025)
        assert summary.count == 1
        assert summary.total == 50.0

    def test_preserves_input_order(self, sales):
        summary = monthly_sales(list(reversed(sales)), NOW)
        assert [s.id for s in summary.sales] == ["this_month", "three_days", "today"]

    def test_does_not_mutate_input(self, sales):
        before = list(sales)
        daily_sales(sales, NOW)
        weekly_sales(sales, NOW)
        monthly_sales(sales, NOW)
        assert sales == before
        assert all(a is b for a, b in zip(sales, before))


def test_sales_in_range_inclusive(sales):
    start = _local(2026, 10, 12, 18)
    end = _local(2026, 10, 15, 9)
    result = sales_in_range(sales, start, end)
    assert [s.id for s in result] == ["today", "three_days"]


def test_date_range():
    start, end = date_range(30, NOW)
    assert end == NOW
    assert end - start == timedelta(days=30)


def test_average_order_value(sales):
    assert average_order_value(weekly_sales(sales, NOW)) == 16.25
    assert average_order_value(daily_sales([], NOW)) == 0.0
