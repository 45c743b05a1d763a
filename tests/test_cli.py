"""Tests for the command-line interface."""

import argparse
import json

import pytest

from frispy.cli import _sale_arg, build_parser, main


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Config pointing at a temporary database with seeding turned off."""
    monkeypatch.delenv("FRISPY_DB_PATH", raising=False)
    monkeypatch.delenv("FRISPY_CURRENCY_SYMBOL", raising=False)
    path = tmp_path / "config.toml"
    path.write_text(
        f'[database]\npath = "{(tmp_path / "pos.db").as_posix()}"\n\n'
        "[sample_data]\nenabled = false\ndays = 2\n",
        encoding="utf-8",
    )
    return str(path)


def _run(config_file, *args):
    main(["--config", config_file, *args])


class TestParser:
    def test_sale_arg(self):
        assert _sale_arg("1") == ("1", 1)
        assert _sale_arg("17:3") == ("17", 3)

    @pytest.mark.parametrize("value", [":2", "1:x", "1:0"])
    def test_sale_arg_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            _sale_arg(value)

    def test_order_status_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["order-status", "abc", "served"])


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_menu_lists_sample_items(config_file, capsys):
    _run(config_file, "menu", "--category", "Beverages")
    out = capsys.readouterr().out
    assert "FRISPY COLD COFFEE" in out
    assert "FRISPY Chicken FRY" not in out


def test_sell_then_dashboard_json(config_file, capsys):
    _run(config_file, "sell", "1:2", "2")
    out = capsys.readouterr().out
    assert "Total: $250.00" in out

    _run(config_file, "dashboard", "--json")
    data = json.loads(capsys.readouterr().out)
    assert data["daily"]["count"] == 1
    assert data["daily"]["total"] == 250
    assert data["dailyItemsSold"] == 3
    assert data["bestSellers"][0]["id"] == "1"


def test_sell_unknown_item(config_file, capsys):
    with pytest.raises(SystemExit) as exc:
        _run(config_file, "sell", "999")
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_order_status_rejects_completed(config_file, capsys):
    _run(config_file, "sell", "1")
    capsys.readouterr()
    _run(config_file, "orders")
    order_id = capsys.readouterr().out.strip().rsplit("(", 1)[1].rstrip(")")

    with pytest.raises(SystemExit):
        _run(config_file, "order-status", order_id, "pending")
    assert "cannot go from completed" in capsys.readouterr().err


def test_adjust_and_low_inventory(config_file, capsys):
    _run(config_file, "adjust", "9", "-6")
    assert "Coke Syrup: 2 boxes [low]" in capsys.readouterr().out

    _run(config_file, "inventory", "--low", "--json")
    data = json.loads(capsys.readouterr().out)
    assert [i["name"] for i in data] == ["Coke Syrup"]
    assert data[0]["status"] == "low"


def test_init_seeds_once(config_file, capsys):
    _run(config_file, "init", "--seed", "3")
    assert "Seeded" in capsys.readouterr().out
    _run(config_file, "init")
    assert "already has sales" in capsys.readouterr().out


def test_best_sellers_empty(config_file, capsys):
    _run(config_file, "best-sellers")
    assert "No sales recorded." in capsys.readouterr().out


def test_chart_days(config_file, capsys):
    _run(config_file, "chart", "--days", "3")
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3


@pytest.mark.parametrize("flags", [["--from", "2026-10-01"], ["--to", "2026-10-15"]])
def test_dashboard_range_needs_both_ends(config_file, capsys, flags):
    with pytest.raises(SystemExit) as exc:
        _run(config_file, "dashboard", *flags)
    assert exc.value.code == 2
    assert "--from and --to must be given together" in capsys.readouterr().err


def test_dashboard_custom_range_json(config_file, capsys):
    _run(config_file, "sell", "2")
    capsys.readouterr()
    _run(config_file, "dashboard", "--json", "--from", "2000-01-01", "--to", "2099-12-31")
    data = json.loads(capsys.readouterr().out)
    assert data["customRange"]["count"] == 1
    assert data["customRange"]["total"] == 70
