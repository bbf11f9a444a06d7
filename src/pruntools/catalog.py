"""Material categories, name normalisation and the materials/quotes join."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from pruntools.api import exchange as exchange_api
from pruntools.api import materials as materials_api
from pruntools.client import FIOClient
from pruntools.models import ExchangeQuote, Material, MaterialListing
from pruntools.text import to_header_case

logger = logging.getLogger(__name__)

ALL = "all"

CATEGORIES: tuple[str, ...] = (
    "Agricultural Products",
    "Alloys",
    "Chemicals",
    "Construction Materials",
    "Construction Parts",
    "Construction Prefabs",
    "Consumables Basic",
    "Consumables Luxury",
    "Drones",
    "Electronic Devices",
    "Electronic Parts",
    "Electronic Pieces",
    "Electronic Systems",
    "Elements",
    "Energy Systems",
    "Fuels",
    "Gases",
    "Liquids",
    "Medical Equipment",
    "Metals",
    "Minerals",
    "Plastics",
    "Ship Engines",
    "Ship Kits",
    "Ship Parts",
    "Ship Shields",
    "Software Components",
    "Software Systems",
    "Software Tools",
    "Textiles",
    "Unit Prefabs",
    "Utility",
)

_BY_LOWER = {c.lower(): c for c in CATEGORIES}


class UnknownCategory(ValueError):
    """Raised for a category that is not in CATEGORIES."""


def category_slug(name: str) -> str:
    """Path segment form: 'Agricultural Products' -> 'Agricultural+Products'."""
    return name.replace(" ", "+")


def category_from_slug(slug: str) -> str:
    return slug.replace("+", " ")


def category_param(name: str) -> str:
    """Query-string form: 'Agricultural Products' -> 'agricultural products'."""
    return name.lower()


def resolve_category(raw: str | None) -> str | None:
    """Canonical category name for a slug, param or name; None means all."""
    if raw is None:
        return None
    name = category_from_slug(raw).strip()
    if not name or name.lower() == ALL:
        return None
    try:
        return _BY_LOWER[name.lower()]
    except KeyError:
        raise UnknownCategory(raw) from None


def normalize_material(material: Material) -> Material:
    """Header-case the display names FIO returns in mixed case."""
    return material.model_copy(update={
        "category_name": to_header_case(material.category_name),
        "name": to_header_case(material.name),
    })


def attach_exchanges(
    materials: Iterable[Material], quotes: Iterable[ExchangeQuote],
) -> list[MaterialListing]:
    """Pair every material with the quotes whose ticker matches its own."""
    by_ticker: dict[str, list[ExchangeQuote]] = defaultdict(list)
    for quote in quotes:
        by_ticker[quote.material_ticker].append(quote)
    return [
        MaterialListing(
            **m.model_dump(),
            exchanges=list(by_ticker.get(m.ticker, [])),
        )
        for m in materials
    ]


async def load_materials(client: FIOClient, category: str | None) -> list[Material]:
    """Fetch (one category or all) and normalise materials."""
    if category is None:
        materials = await materials_api.get_all_materials(client)
    else:
        materials = await materials_api.get_materials_by_category(client, category)
    logger.debug("Loaded %d materials (category=%s)", len(materials), category or ALL)
    return [normalize_material(m) for m in materials]


async def load_listings(client: FIOClient, category: str | None) -> list[MaterialListing]:
    """Materials joined with their exchange quotes."""
    materials = await load_materials(client, category)
    quotes = await exchange_api.get_all_exchanges(client)
    return attach_exchanges(materials, quotes)
