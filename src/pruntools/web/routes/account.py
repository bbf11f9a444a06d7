"""Account routes: save a FIO API key for this browser."""

from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from pruntools.web.app import USER_COOKIE, get_user_db, render

router = APIRouter(prefix="/account")

_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def _mask(key: str) -> str:
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}{'*' * (len(key) - 8)}{key[-4:]}"


@router.get("", response_class=HTMLResponse)
async def account_view(request: Request, saved: bool = False) -> HTMLResponse:
    user_id = request.cookies.get(USER_COOKIE)
    user = get_user_db(request).get_user(user_id) if user_id else None
    return render(request, "account.html", {
        "user": user,
        "masked_key": _mask(user.fio_api_key) if user else "",
        "saved": saved,
        "active_nav": "account",
    })


@router.post("")
async def save_account(
    request: Request,
    username: str = Form(...),
    api_key: str = Form(...),
) -> RedirectResponse:
    """Create or update this browser's user, then remember it in a cookie."""
    db = get_user_db(request)
    username = username.strip()
    api_key = api_key.strip()
    user_id = request.cookies.get(USER_COOKIE)
    if not user_id or not db.set_api_key(user_id, username, api_key):
        user_id = db.create_user(username, api_key).id

    response = RedirectResponse("/account?saved=true", status_code=303)
    response.set_cookie(
        USER_COOKIE, user_id, max_age=_COOKIE_MAX_AGE, httponly=True, samesite="lax",
    )
    return response


@router.post("/forget")
async def forget_account(request: Request) -> RedirectResponse:
    """Delete this browser's saved key."""
    user_id = request.cookies.get(USER_COOKIE)
    if user_id:
        get_user_db(request).delete_user(user_id)
    response = RedirectResponse("/account", status_code=303)
    response.delete_cookie(USER_COOKIE)
    return response
