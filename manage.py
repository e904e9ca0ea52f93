#!/usr/bin/env python3
"""
DSV Flow management CLI.

Usage:
    python manage.py serve                          Start the API server
    python manage.py report [--start D] [--end D]   Write the sales report PDF
    python manage.py low-stock                      List items at or below minimum stock
"""

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    from dsvflow.config import get_settings

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port

    print(f"Starting server on {host}:{port}...")
    uvicorn.run(
        "dsvflow.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


async def _write_report(start: date | None, end: date | None, output: Path | None) -> Path:
    from dsvflow.application.use_cases import GenerateSalesReportUseCase
    from dsvflow.infrastructure.storage import close_kv_store

    try:
        rendered = await GenerateSalesReportUseCase().render(start, end)
    finally:
        await close_kv_store()

    path = output or ROOT_DIR / rendered.filename
    path.write_bytes(rendered.content)
    report = rendered.report
    print(
        f"{report.total_orders} orders, {report.completed_count} fulfilled, "
        f"sales {report.total_sales:,.2f}"
    )
    return path


def cmd_report(args: argparse.Namespace) -> None:
    """Render the sales report for a date window to a PDF file."""
    from dsvflow.core.exceptions import ValidationError

    try:
        path = asyncio.run(_write_report(args.start, args.end, args.output))
    except ValidationError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    print(f"Report written to {path}")


async def _low_stock() -> list:
    from dsvflow.application.services import get_inventory_repository
    from dsvflow.infrastructure.storage import close_kv_store

    try:
        inventory = await get_inventory_repository()
        return inventory.low_stock_items()
    finally:
        await close_kv_store()


def cmd_low_stock(args: argparse.Namespace) -> None:
    """Print items at or below their minimum stock."""
    items = asyncio.run(_low_stock())
    if not items:
        print("All items are above their minimum stock.")
        return

    print(f"{'Item':<32} {'Category':<14} {'Qty':>6} {'Min':>6}")
    for item in items:
        print(f"{item.name[:32]:<32} {item.category[:14]:<14} {item.quantity:>6} {item.min_stock:>6}")
    if args.fail:
        sys.exit(2)


def main() -> None:
    from dsvflow.config import configure_logging

    configure_logging()

    parser = argparse.ArgumentParser(
        description="DSV Flow management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # report
    p_report = sub.add_parser("report", help="Write the sales report PDF")
    p_report.add_argument(
        "--start", type=date.fromisoformat, default=None,
        help="First day, YYYY-MM-DD (default: first of this month)",
    )
    p_report.add_argument(
        "--end", type=date.fromisoformat, default=None,
        help="Last day, YYYY-MM-DD (default: today)",
    )
    p_report.add_argument("--output", type=Path, default=None, help="Output file path")
    p_report.set_defaults(func=cmd_report)

    # low-stock
    p_low = sub.add_parser("low-stock", help="List items at or below minimum stock")
    p_low.add_argument("--fail", action="store_true", help="Exit with status 2 when any item is low")
    p_low.set_defaults(func=cmd_low_stock)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
