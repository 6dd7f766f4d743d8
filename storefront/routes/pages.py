"""
Storefront page routes

    GET /                  -> 302 to the visitor's locale
    GET /{locale}          -> home page
    GET /{locale}/login    -> login page
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from storefront.constants.pages import HOME_PAGE, LOGIN_PAGE
from storefront.i18n.catalog import load_messages
from storefront.i18n.locale import resolve_locale
from storefront.routes.deps import (
    build_request_context,
    get_session_service,
    record_page_outcome,
    require_supported_locale,
)
from storefront.schemas.metadata import PageSeo
from storefront.services.metadata_service import build_page_bundle
from storefront.services.session_service import SessionService

router = APIRouter(tags=["Pages"])
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


@router.get("/", include_in_schema=False)
async def root(request: Request) -> RedirectResponse:
    locale = resolve_locale(None, getattr(request.state, "locale_hint", None))
    return RedirectResponse(f"/{locale}", status_code=302)


async def render_page(
    request: Request,
    locale: str,
    page: PageSeo,
    session_service: SessionService,
) -> HTMLResponse:
    ctx = build_request_context(request, locale, page)
    bundle = await build_page_bundle(ctx, page, session_service)
    record_page_outcome(request, page, bundle)

    response = templates.TemplateResponse(
        request,
        f"{page.name}.html",
        {
            "bundle": bundle,
            "site": bundle.site,
            "seo": bundle.seo,
            "session": bundle.session,
            "messages": load_messages(bundle.locale),
        },
    )
    response.headers["Content-Language"] = bundle.locale
    return response


@router.get("/{locale}", response_class=HTMLResponse)
async def home_page(
    request: Request,
    locale: str = Depends(require_supported_locale),
    session_service: SessionService = Depends(get_session_service),
) -> HTMLResponse:
    return await render_page(request, locale, HOME_PAGE, session_service)


@router.get("/{locale}/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    locale: str = Depends(require_supported_locale),
    session_service: SessionService = Depends(get_session_service),
) -> HTMLResponse:
    return await render_page(request, locale, LOGIN_PAGE, session_service)
