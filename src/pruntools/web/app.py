"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException

from pruntools.catalog import UnknownCategory
from pruntools.client import ApiError, FIOClient
from pruntools.config import Settings, load_settings
from pruntools.data.user_db import UserDatabase, resolve_api_key
from pruntools.table import DataTable
from pruntools.web.formatting import register_filters

logger = logging.getLogger(__name__)

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"

USER_COOKIE = "pruntools_user"


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    ``transport`` replaces the network for every outbound client (tests).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create and tear down the shared clients and the user store."""
        app_settings = settings or load_settings()
        client = FIOClient(app_settings, transport=transport)
        kawa_http = httpx.AsyncClient(transport=transport)
        user_db = UserDatabase(db_path=app_settings.data_dir / "users.db")
        app.state.settings = app_settings
        app.state.client = client
        app.state.kawa_http = kawa_http
        app.state.user_db = user_db
        logger.info("Serving FIO data from %s", app_settings.base_url)
        yield
        user_db.close()
        await kawa_http.aclose()
        await client.close()

    app = FastAPI(title="Prun Tools", lifespan=lifespan)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    register_filters(templates.env)
    app.state.templates = templates

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(UnknownCategory, unknown_category_handler)
    app.add_exception_handler(HTTPException, http_error_handler)

    # Register routes
    from pruntools.web.routes import account, exchange, home, kawa, materials, shipping, stocks

    app.include_router(home.router)
    app.include_router(materials.router)
    app.include_router(stocks.router)
    app.include_router(exchange.router)
    app.include_router(shipping.router)
    app.include_router(account.router)
    app.include_router(kawa.router)

    return app


def get_client(request: Request) -> FIOClient:
    """Extract the shared client from app state."""
    return request.app.state.client


def get_user_db(request: Request) -> UserDatabase:
    return request.app.state.user_db


def get_api_key(request: Request) -> str | None:
    """API key for this browser: its saved key, else the server default."""
    settings: Settings = request.app.state.settings
    return resolve_api_key(
        get_user_db(request), request.cookies.get(USER_COOKIE), settings.fio_api_key,
    )


def is_htmx(request: Request) -> bool:
    return request.headers.get("HX-Request") == "true"


def render(
    request: Request,
    template: str,
    context: dict | None = None,
    *,
    status_code: int = 200,
) -> HTMLResponse:
    """Render a Jinja2 template."""
    ctx = {"request": request}
    if context:
        ctx.update(context)
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(request, template, ctx, status_code=status_code)


def render_error(request: Request, status_code: int, reason: str) -> HTMLResponse:
    return render(
        request,
        "error.html",
        {"status_code": status_code, "reason": reason},
        status_code=status_code,
    )


async def api_error_handler(request: Request, exc: ApiError) -> HTMLResponse:
    """Upstream failures become an error page with the upstream status."""
    logger.warning("Upstream error %d on %s: %s", exc.code, request.url.path, exc)
    status_code = exc.code if exc.code >= 400 else FIOClient.TRANSPORT_ERROR_CODE
    return render_error(request, status_code, str(exc))


async def unknown_category_handler(request: Request, exc: UnknownCategory) -> HTMLResponse:
    return render_error(request, 404, f"Unknown category '{exc}'")


async def http_error_handler(request: Request, exc: HTTPException) -> HTMLResponse:
    return render_error(request, exc.status_code, str(exc.detail))


def render_table(
    request: Request,
    template: str,
    table: DataTable,
    context: dict | None = None,
) -> HTMLResponse:
    """Full page, or only the table partial when htmx asks for it."""
    ctx = {"table": table, "table_url": request.url.path}
    if context:
        ctx.update(context)
    if is_htmx(request):
        return render(request, "components/data_table.html", ctx)
    return render(request, template, ctx)
