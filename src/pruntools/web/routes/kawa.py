"""KAWA route: community prices for one planet."""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from pruntools.client import ApiError
from pruntools.kawa.importer import load_prices
from pruntools.table import DataTable
from pruntools.web.app import render_table
from pruntools.web.columns import KAWA_COLUMNS

router = APIRouter(prefix="/kawa")


@router.get("", response_class=HTMLResponse)
async def kawa_view(
    request: Request,
    planet: str | None = None,
    sort: str | None = None,
    q: str | None = None,
    sort_by: str | None = None,
    multi: bool = False,
) -> HTMLResponse:
    settings = request.app.state.settings
    planet = (planet or "").strip() or settings.kawa_planet
    try:
        prices = await load_prices(settings, planet, http=request.app.state.kawa_http)
    except httpx.HTTPStatusError as e:
        raise ApiError(str(e), code=e.response.status_code) from e
    except httpx.TransportError as e:
        raise ApiError(str(e), code=502) from e
    except (ValidationError, ValueError) as e:
        raise ApiError(f"Unreadable KAWA price list: {e}", code=502) from e
    table = DataTable.build(
        prices, KAWA_COLUMNS, sort=sort or "ticker", query=q, sort_by=sort_by, multi=multi,
    )
    return render_table(request, "kawa.html", table, {
        "planet": planet,
        "extra_params": {"planet": planet},
        "active_nav": "kawa",
    })
