"""Materials route: every material, optionally one category, no quotes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from pruntools.catalog import CATEGORIES, category_param, load_materials, resolve_category
from pruntools.table import DataTable
from pruntools.web.app import get_client, render_table
from pruntools.web.columns import MATERIAL_COLUMNS

router = APIRouter(prefix="/materials")


@router.get("", response_class=HTMLResponse)
async def materials_view(
    request: Request,
    category: str | None = None,
    sort: str | None = None,
    q: str | None = None,
    sort_by: str | None = None,
    multi: bool = False,
) -> HTMLResponse:
    """Full page (or table partial): materials table with category buttons."""
    selected = resolve_category(category)
    materials = await load_materials(get_client(request), selected)
    table = DataTable.build(
        materials, MATERIAL_COLUMNS, sort=sort, query=q, sort_by=sort_by, multi=multi,
    )
    return render_table(request, "materials.html", table, {
        "categories": CATEGORIES,
        "category_param": category_param,
        "selected": selected,
        "extra_params": {"category": category_param(selected)} if selected else {},
        "active_nav": "materials",
    })
