"""KAWA community price list importer.

The list is published through a PocketBase collection; every page carries
``items`` plus ``page``/``totalPages`` counters.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import httpx

from pruntools.config import Settings
from pruntools.models import KawaPrice

logger = logging.getLogger(__name__)

PER_PAGE = 400


async def fetch_all_pages(
    http: httpx.AsyncClient, url: str, *, per_page: int = PER_PAGE,
) -> list[dict[str, Any]]:
    """Fetch every page of a PocketBase collection, in page order."""
    items: list[dict[str, Any]] = []
    page = 1
    while True:
        logger.debug("Fetching page %d", page)
        response = await http.get(url, params={"page": page, "perPage": per_page})
        response.raise_for_status()
        body = response.json()
        batch = body.get("items", [])
        items.extend(batch)
        logger.debug("Fetched %d items", len(batch))
        if page >= body.get("totalPages", 0) or not batch:
            break
        page += 1
    return items


def filter_by_planet(prices: Iterable[KawaPrice], planet: str) -> list[KawaPrice]:
    return [p for p in prices if p.planet == planet]


async def load_prices(
    settings: Settings,
    planet: str | None = None,
    *,
    http: httpx.AsyncClient | None = None,
) -> list[KawaPrice]:
    """Fetch the KAWA list and keep one planet's prices."""
    planet = planet or settings.kawa_planet
    if http is None:
        async with httpx.AsyncClient() as owned:
            items = await fetch_all_pages(owned, settings.kawa_url)
    else:
        items = await fetch_all_pages(http, settings.kawa_url)
    prices = filter_by_planet((KawaPrice.model_validate(i) for i in items), planet)
    logger.info("KAWA: %d of %d prices are for %s", len(prices), len(items), planet)
    return prices


def write_json(prices: Iterable[KawaPrice], path: Path) -> None:
    """Write prices as a JSON list of {ticker, price, planet}."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([p.model_dump() for p in prices], indent=2))
