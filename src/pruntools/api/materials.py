"""Material API operations."""

from __future__ import annotations

from urllib.parse import quote

from pruntools.client import FIOClient
from pruntools.models import Material


async def get_all_materials(client: FIOClient) -> list[Material]:
    """Fetch every material."""
    body = await client.get("/material/allmaterials")
    return [Material.model_validate(m) for m in body or []]


async def get_materials_by_category(client: FIOClient, category: str) -> list[Material]:
    """Fetch the materials of one category (e.g. 'agricultural products')."""
    body = await client.get(f"/material/category/{quote(category.lower(), safe='')}")
    return [Material.model_validate(m) for m in body or []]
