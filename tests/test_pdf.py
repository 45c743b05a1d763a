"""Tests for PDF report generation."""

from datetime import datetime, timedelta

import pytest

from frispy.dashboard import build_dashboard
from frispy.models import InventoryItem, LineItem, SaleTransaction

NOW = datetime(2026, 10, 15, 14, 30).astimezone()


def _make_dashboard(with_sales: bool = True):
    sales = []
    if with_sales:
        line = LineItem(id="1", name="FRISPY Chicken FRY", price=90, quantity=2, total=180)
        sales = [
            SaleTransaction(id=str(n), items=(line,), total=180, timestamp=NOW - timedelta(hours=n))
            for n in range(5)
        ]
    inventory = [
        InventoryItem(id="9", name="Coke Syrup", quantity=1, min_quantity=3, unit="boxes",
                      supplier="Beverage Distributor"),
        InventoryItem(id="14", name="Napkins", quantity=500, min_quantity=150),
    ]
    return build_dashboard(sales, inventory, now=NOW)


class TestReportGeneration:
    @pytest.fixture(autouse=True)
    def _require_reportlab(self):
        try:
            from reportlab.lib.pagesizes import A4  # noqa: F401
        except ImportError:
            pytest.skip("reportlab not installed")

    def test_generate_report_creates_file(self, tmp_path):
        from frispy.pdf import generate_report

        output = tmp_path / "report.pdf"
        result = generate_report(_make_dashboard(), output, currency_symbol="Rs ")
        assert result == output
        assert output.stat().st_size > 0
        with open(output, "rb") as f:
            assert f.read(4) == b"%PDF"

    def test_generate_report_creates_parent_dirs(self, tmp_path):
        from frispy.pdf import generate_report

        output = tmp_path / "subdir" / "nested" / "report.pdf"
        generate_report(_make_dashboard(), output)
        assert output.exists()

    def test_generate_report_without_sales(self, tmp_path):
        from frispy.pdf import generate_report

        output = tmp_path / "empty.pdf"
        generate_report(_make_dashboard(with_sales=False), output)
        assert output.exists()


def test_generate_report_without_reportlab(tmp_path, monkeypatch):
    """A missing reportlab surfaces as ImportError with an install hint."""
    import sys

    from frispy.pdf import generate_report

    monkeypatch.setitem(sys.modules, "reportlab", None)
    monkeypatch.setitem(sys.modules, "reportlab.lib", None)
    with pytest.raises(ImportError, match="frispy-pos\\[pdf\\]"):
        generate_report(_make_dashboard(), tmp_path / "x.pdf")
