"""CLI entry point for the register."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, time

from dotenv import load_dotenv

from .analytics import (
    average_order_value,
    best_sellers,
    daily_sales,
    format_currency,
    format_currency_compact,
    format_date,
    format_number,
    format_time,
    items_by_category,
    low_stock_items,
    monthly_sales,
    peak_hours,
    sales_by_day,
    sales_in_range,
    search_menu,
    stock_status,
    weekly_sales,
)
from .app import AppState, initialize_app, refreshing, seed_sample_data
from .config import PosConfig, load_config
from .dashboard import build_dashboard
from .db import PosStore
from .errors import FrispyError
from .models import OrderStatus
from .orders import orders_by_status, todays_orders
from .pos import Cart, checkout

_PERIODS = ("all", "today", "week", "month")


def _sale_arg(value: str) -> tuple[str, int]:
    """Parse ``ITEM`` or ``ITEM:QTY``."""
    item_id, _, qty = value.partition(":")
    if not item_id:
        raise argparse.ArgumentTypeError(f"missing menu item id in {value!r}")
    try:
        quantity = int(qty) if qty else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid quantity in {value!r}")
    if quantity <= 0:
        raise argparse.ArgumentTypeError(f"quantity must be positive in {value!r}")
    return item_id, quantity


def _iso_date(value: str):
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frispy-pos",
        description="Frispy register: record sales, track stock, view analytics",
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None, help="Path to a TOML config file"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    init_parser = sub.add_parser("init", help="Seed sample data into an empty store")
    init_parser.add_argument(
        "--force", action="store_true", help="Wipe the store and reseed"
    )
    init_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    dash_parser = sub.add_parser("dashboard", help="Show today/week/month figures")
    dash_parser.add_argument("--json", action="store_true", help="Output JSON")
    dash_parser.add_argument(
        "--from", dest="start", type=_iso_date, default=None,
        help="Custom range start (YYYY-MM-DD)",
    )
    dash_parser.add_argument(
        "--to", dest="end", type=_iso_date, default=None,
        help="Custom range end (YYYY-MM-DD)",
    )

    menu_parser = sub.add_parser("menu", help="List menu items")
    menu_parser.add_argument("--category", type=str, default=None)
    menu_parser.add_argument("--search", type=str, default=None)

    sell_parser = sub.add_parser("sell", help="Check out items (ITEM or ITEM:QTY)")
    sell_parser.add_argument("items", type=_sale_arg, nargs="+", metavar="ITEM[:QTY]")

    inv_parser = sub.add_parser("inventory", help="List stock levels")
    inv_parser.add_argument("--low", action="store_true", help="Only low stock")
    inv_parser.add_argument("--category", type=str, default=None)
    inv_parser.add_argument("--json", action="store_true", help="Output JSON")

    adj_parser = sub.add_parser("adjust", help="Change a stock count by DELTA")
    adj_parser.add_argument("item_id", type=str)
    adj_parser.add_argument("delta", type=int)

    orders_parser = sub.add_parser("orders", help="List orders")
    orders_parser.add_argument(
        "--status", choices=[s.value for s in OrderStatus], default=None
    )
    orders_parser.add_argument("--today", action="store_true")

    status_parser = sub.add_parser("order-status", help="Move an order to a new status")
    status_parser.add_argument("order_id", type=str)
    status_parser.add_argument("status", choices=[s.value for s in OrderStatus])

    best_parser = sub.add_parser("best-sellers", help="Rank items by units sold")
    best_parser.add_argument("--limit", type=int, default=None)
    best_parser.add_argument("--period", choices=_PERIODS, default="all")

    peak_parser = sub.add_parser("peak-hours", help="Sales by hour of day")
    peak_parser.add_argument("--top", type=int, default=24)

    chart_parser = sub.add_parser("chart", help="Daily totals for the last N days")
    chart_parser.add_argument("--days", type=int, default=None)

    report_parser = sub.add_parser("report", help="Write a PDF sales report")
    report_parser.add_argument("file", type=str)

    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "dashboard" and (args.start is None) != (args.end is None):
        parser.error("dashboard: --from and --to must be given together")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    try:
        with PosStore(config.database.path) as store:
            state = AppState()
            if args.command == "init":
                _cmd_init(store, config, args)
                return
            initialize_app(
                state,
                store,
                seed_enabled=config.sample_data.enabled,
                seed_days=config.sample_data.days,
            )
            _dispatch(store, config, state, args)
    except FrispyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _dispatch(store: PosStore, config: PosConfig, state: AppState, args) -> None:
    match args.command:
        case "dashboard":
            with refreshing(state):
                _cmd_dashboard(store, config, args)
        case "menu":
            _cmd_menu(store, config, args)
        case "sell":
            _cmd_sell(store, config, args)
        case "inventory":
            _cmd_inventory(store, args)
        case "adjust":
            _cmd_adjust(store, args)
        case "orders":
            _cmd_orders(store, config, args)
        case "order-status":
            _cmd_order_status(store, args)
        case "best-sellers":
            _cmd_best_sellers(store, config, args)
        case "peak-hours":
            _cmd_peak_hours(store, config, args)
        case "chart":
            _cmd_chart(store, config, args)
        case "report":
            _cmd_report(store, config, args)


def _cmd_init(store: PosStore, config: PosConfig, args) -> None:
    if args.force:
        store.clear_all()
    elif store.sales.get_sales():
        print("Store already has sales; use --force to reset it.")
        return
    count = seed_sample_data(store, days=config.sample_data.days, seed=args.seed)
    print(f"Seeded {count} sample sales over {config.sample_data.days} days.")


def _cmd_dashboard(store: PosStore, config: PosConfig, args) -> None:
    sales = store.sales.get_sales()
    inventory = store.inventory.get_inventory()
    dash = build_dashboard(sales, inventory, config=config.analytics)
    symbol = config.display.currency_symbol

    custom = None
    if args.start and args.end:
        start = datetime.combine(args.start, time.min)
        end = datetime.combine(args.end, time(23, 59, 59))
        custom = sales_in_range(sales, start, end)

    if args.json:
        data = dash.to_dict()
        if custom is not None:
            data["customRange"] = {
                "start": args.start.isoformat(),
                "end": args.end.isoformat(),
                "total": sum(s.total for s in custom),
                "count": len(custom),
            }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    print(f"📊 Dashboard  {format_date(dash.generated_at)} {format_time(dash.generated_at)}")
    for label, window in (
        ("Today", dash.daily),
        ("Last 7 days", dash.weekly),
        ("This month", dash.monthly),
    ):
        print(
            f"  {label:<12} {format_currency_compact(window.total, symbol):>12}"
            f"  {format_number(window.count):>6} orders"
            f"  avg {format_currency(average_order_value(window), symbol)}"
        )
    if custom is not None:
        total = sum(s.total for s in custom)
        print(
            f"  {args.start} → {args.end}: {format_currency_compact(total, symbol)}"
            f" ({len(custom)} orders)"
        )
    print(f"  Items sold today: {dash.daily_items_sold}")

    if dash.daily_best_sellers:
        print("\n🏆 Today's best sellers:")
        for rank, b in enumerate(dash.daily_best_sellers, 1):
            print(f"  {rank}. {b.image} {b.name:<28} {b.quantity:>4} sold")

    if dash.low_stock:
        print(f"\n⚠  Low stock ({len(dash.low_stock)}):")
        for item in dash.low_stock:
            print(
                f"  {item.name:<20} {item.quantity:>5} {item.unit:<6}"
                f" (min {item.min_quantity}) [{stock_status(item).value}]"
            )


def _cmd_menu(store: PosStore, config: PosConfig, args) -> None:
    items = store.menu.get_menu_items()
    if args.category:
        items = items_by_category(items, args.category)
    if args.search:
        items = search_menu(items, args.search)
    if not items:
        print("No menu items found.")
        return
    for item in items:
        price = format_currency(item.price, config.display.currency_symbol)
        print(f"  {item.id:>4}  {item.image} {item.name:<28} {price:>10}  [{item.category}]")


def _cmd_sell(store: PosStore, config: PosConfig, args) -> None:
    cart = Cart()
    for item_id, quantity in args.items:
        cart.add(item_id, quantity)
    result = checkout(cart, store.menu.get_menu_items())
    store.record_checkout(result)

    symbol = config.display.currency_symbol
    print(f"✅ Order {result.order.order_number} completed")
    for line in result.sale.items:
        print(f"  {line.quantity} x {line.name:<28} {format_currency(line.total, symbol):>10}")
    print(f"  Total: {format_currency(result.sale.total, symbol)}")


def _cmd_inventory(store: PosStore, args) -> None:
    items = store.inventory.get_inventory()
    if args.category:
        items = items_by_category(items, args.category)
    if args.low:
        items = low_stock_items(items)

    if args.json:
        data = [{**i.to_dict(), "status": stock_status(i).value} for i in items]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not items:
        print("No inventory items found.")
        return
    for item in items:
        print(
            f"  {item.id:>4}  {item.name:<20} {item.quantity:>5} {item.unit:<6}"
            f" min {item.min_quantity:<5} {stock_status(item).value:<9} {item.supplier}"
        )


def _cmd_adjust(store: PosStore, args) -> None:
    item = store.inventory.adjust_quantity(args.item_id, args.delta)
    print(f"{item.name}: {item.quantity} {item.unit} [{stock_status(item).value}]")


def _cmd_orders(store: PosStore, config: PosConfig, args) -> None:
    orders = store.orders.get_orders()
    if args.status:
        orders = orders_by_status(orders, args.status)
    if args.today:
        orders = todays_orders(orders)
    if not orders:
        print("No orders found.")
        return
    symbol = config.display.currency_symbol
    for order in orders:
        count = sum(i.quantity for i in order.items)
        print(
            f"  {order.order_number:<8} {format_time(order.timestamp)}"
            f"  {order.status.value:<10} {count:>3} items"
            f"  {format_currency(order.total, symbol):>10}  ({order.id})"
        )


def _cmd_order_status(store: PosStore, args) -> None:
    order = store.orders.update_status(args.order_id, args.status)
    print(f"Order {order.order_number} is now {order.status.value}")


def _cmd_best_sellers(store: PosStore, config: PosConfig, args) -> None:
    sales = store.sales.get_sales()
    match args.period:
        case "today":
            sales = list(daily_sales(sales).sales)
        case "week":
            sales = list(weekly_sales(sales).sales)
        case "month":
            sales = list(monthly_sales(sales).sales)

    limit = args.limit if args.limit is not None else config.analytics.best_sellers_limit
    ranked = best_sellers(sales, limit)
    if not ranked:
        print("No sales recorded.")
        return
    symbol = config.display.currency_symbol
    for rank, b in enumerate(ranked, 1):
        print(
            f"  {rank:>2}. {b.image} {b.name:<28} {b.quantity:>5} sold"
            f"  {format_currency_compact(b.revenue, symbol):>10}"
        )


def _cmd_peak_hours(store: PosStore, config: PosConfig, args) -> None:
    buckets = peak_hours(store.sales.get_sales())[: args.top]
    busiest = max((b.count for b in buckets), default=0)
    symbol = config.display.currency_symbol
    for b in buckets:
        bar = "█" * (round(b.count / busiest * 20) if busiest else 0)
        print(
            f"  {b.hour:02d}:00  {b.count:>5}  "
            f"{format_currency_compact(b.total, symbol):>10}  {bar}"
        )


def _cmd_chart(store: PosStore, config: PosConfig, args) -> None:
    days = args.days if args.days is not None else config.analytics.weekly_chart_days
    buckets = sales_by_day(store.sales.get_sales(), days)
    top = max((b.total for b in buckets), default=0.0)
    symbol = config.display.currency_symbol
    for b in buckets:
        bar = "█" * (round(b.total / top * 30) if top else 0)
        print(
            f"  {b.date}  {b.count:>4}  "
            f"{format_currency_compact(b.total, symbol):>10}  {bar}"
        )


def _cmd_report(store: PosStore, config: PosConfig, args) -> None:
    from .pdf import generate_report

    dash = build_dashboard(
        store.sales.get_sales(),
        store.inventory.get_inventory(),
        config=config.analytics,
    )
    try:
        path = generate_report(dash, args.file, config.display.currency_symbol)
    except ImportError as e:
        print(f"PDF error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"📄 Report saved: {path}")
