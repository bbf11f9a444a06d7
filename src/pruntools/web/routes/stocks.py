"""Stocks route: materials joined with exchange quotes, category as a query param."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from pruntools.catalog import CATEGORIES, category_param, load_listings, resolve_category
from pruntools.table import DataTable
from pruntools.web.app import get_client, render_table
from pruntools.web.columns import LISTING_COLUMNS

router = APIRouter(prefix="/stocks")


@router.get("", response_class=HTMLResponse)
async def stocks_view(
    request: Request,
    category: str | None = None,
    sort: str | None = None,
    q: str | None = None,
    sort_by: str | None = None,
    multi: bool = False,
) -> HTMLResponse:
    selected = resolve_category(category)
    listings = await load_listings(get_client(request), selected)
    table = DataTable.build(
        listings, LISTING_COLUMNS, sort=sort, query=q, sort_by=sort_by, multi=multi,
    )
    return render_table(request, "stocks.html", table, {
        "categories": CATEGORIES,
        "category_param": category_param,
        "selected": selected,
        "extra_params": {"category": category_param(selected)} if selected else {},
        "active_nav": "stocks",
    })
