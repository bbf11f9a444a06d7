"""Exchange routes: same listing table as /stocks, category as a path segment."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from pruntools.catalog import ALL, CATEGORIES, category_slug, load_listings, resolve_category
from pruntools.table import DataTable
from pruntools.web.app import get_client, render_table
from pruntools.web.columns import LISTING_COLUMNS

router = APIRouter(prefix="/exchange")


@router.get("")
async def exchange_index() -> RedirectResponse:
    return RedirectResponse("/exchange/all", status_code=307)


@router.get("/{category}", response_class=HTMLResponse)
async def exchange_category(
    request: Request,
    category: str,
    sort: str | None = None,
    q: str | None = None,
    sort_by: str | None = None,
    multi: bool = False,
) -> HTMLResponse:
    """Full page (or table partial) for one category slug, or 'all'."""
    selected = resolve_category(category)
    listings = await load_listings(get_client(request), selected)
    table = DataTable.build(
        listings, LISTING_COLUMNS, sort=sort, query=q, sort_by=sort_by, multi=multi,
    )
    return render_table(request, "exchange.html", table, {
        "categories": CATEGORIES,
        "category_slug": category_slug,
        "current_slug": category_slug(selected) if selected else ALL,
        "extra_params": {},
        "active_nav": "exchange",
    })
