"""Commodity exchange API operations."""

from __future__ import annotations

from pruntools.client import FIOClient
from pruntools.models import ExchangeQuote


async def get_all_exchanges(client: FIOClient) -> list[ExchangeQuote]:
    """Fetch quotes for every material on every exchange."""
    body = await client.get("/exchange/all")
    return [ExchangeQuote.model_validate(q) for q in body or []]
