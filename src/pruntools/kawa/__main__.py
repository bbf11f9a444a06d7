"""Entry point: python -m pruntools.kawa

Fetches the KAWA price list and prints one planet's prices.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import httpx
from rich.console import Console
from rich.table import Table

from pruntools.config import load_settings
from pruntools.kawa.importer import load_prices, write_json
from pruntools.logging_config import setup_logging
from pruntools.models import KawaPrice


def build_table(prices: list[KawaPrice], planet: str) -> Table:
    table = Table(title=f"KAWA prices: {planet}", header_style="bold")
    table.add_column("Ticker", no_wrap=True)
    table.add_column("Price", justify="right")
    for p in sorted(prices, key=lambda p: p.ticker):
        table.add_row(p.ticker, f"{p.price:,.2f}")
    if not prices:
        table.add_row("[dim]No prices[/dim]", "")
    return table


def main() -> None:
    parser = argparse.ArgumentParser(description="Import KAWA community prices")
    parser.add_argument("--planet", help="Planet to keep (default: settings.kawa_planet)")
    parser.add_argument("--json", type=Path, metavar="FILE", help="Also write prices to FILE")
    args = parser.parse_args()

    settings = load_settings()
    setup_logging(settings.data_dir / "logs", level=settings.log_level)
    planet = args.planet or settings.kawa_planet

    try:
        prices = asyncio.run(load_prices(settings, planet))
    except (httpx.HTTPError, ValueError) as exc:
        print(f"Failed to fetch KAWA prices: {exc}", file=sys.stderr)
        sys.exit(1)

    Console().print(build_table(prices, planet))
    if args.json:
        write_json(prices, args.json)
        print(f"Wrote {len(prices)} prices to {args.json}")


if __name__ == "__main__":
    main()
