"""Ship and flight API operations.

Both endpoints are per-user; the data is only returned when the API key
belongs to the user or has been granted access by them.
"""

from __future__ import annotations

from urllib.parse import quote

from pruntools.client import FIOClient
from pruntools.models import Flight, Ship


async def get_ships(
    client: FIOClient, username: str, api_key: str | None = None,
) -> list[Ship]:
    """Fetch all ships owned by a user."""
    body = await client.get(f"/ship/ships/{quote(username, safe='')}", api_key=api_key)
    return [Ship.model_validate(s) for s in body or []]


async def get_flights(
    client: FIOClient, username: str, api_key: str | None = None,
) -> list[Flight]:
    """Fetch a user's active flights."""
    body = await client.get(f"/ship/flights/{quote(username, safe='')}", api_key=api_key)
    return [Flight.model_validate(f) for f in body or []]
