"""Shipping route: a user's ships and active flights."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from pruntools.api import ships as ships_api
from pruntools.client import ApiError
from pruntools.flights import calculate_progress, is_segment_active, now_ms
from pruntools.web.app import get_api_key, get_client, render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shipping")


@router.get("", response_class=HTMLResponse)
async def shipping_view(request: Request, username: str | None = None) -> HTMLResponse:
    """Username form; with a username, that user's flights and ships.

    Ships are fetched before flights and either failure aborts the page.
    """
    username = (username or "").strip()
    context = {
        "username": username,
        "flights": None,
        "ships": None,
        "now": now_ms(),
        "progress": calculate_progress,
        "segment_active": is_segment_active,
        "active_nav": "shipping",
    }
    if not username:
        return render(request, "shipping.html", context)

    client = get_client(request)
    api_key = get_api_key(request)
    try:
        ships = await ships_api.get_ships(client, username, api_key)
        flights = await ships_api.get_flights(client, username, api_key)
    except ApiError as e:
        if e.code != 401:
            raise
        logger.info("No access to shipping data of %s", username)
        return render(request, "shipping_denied.html", context, status_code=401)

    context.update({"ships": ships, "flights": flights})
    return render(request, "shipping.html", context)
