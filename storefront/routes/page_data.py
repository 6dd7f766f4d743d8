"""
Page data & i18n API

page_data_router  (prefix: /api/v1/page-data)
    GET /{locale}          -> home page bundle
    GET /{locale}/login    -> login page bundle

i18n_router  (prefix: /api/v1/i18n)
    GET /locales           -> supported locales with labels
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from storefront.constants.pages import HOME_PAGE, LOGIN_PAGE
from storefront.i18n.locale import DEFAULT_LOCALE, SUPPORTED_LOCALES, get_language_info
from storefront.routes.deps import (
    build_request_context,
    get_session_service,
    record_page_outcome,
    require_supported_locale,
)
from storefront.services.metadata_service import build_page_bundle
from storefront.services.session_service import SessionService

page_data_router = APIRouter(tags=["Page data"])
i18n_router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


@page_data_router.get("/{locale}")
async def home_page_data(
    request: Request,
    locale: str = Depends(require_supported_locale),
    session_service: SessionService = Depends(get_session_service),
) -> dict[str, Any]:
    ctx = build_request_context(request, locale, HOME_PAGE)
    bundle = await build_page_bundle(ctx, HOME_PAGE, session_service)
    record_page_outcome(request, HOME_PAGE, bundle)
    return bundle.model_dump(mode="json", by_alias=True)


@page_data_router.get("/{locale}/login")
async def login_page_data(
    request: Request,
    locale: str = Depends(require_supported_locale),
    session_service: SessionService = Depends(get_session_service),
) -> dict[str, Any]:
    ctx = build_request_context(request, locale, LOGIN_PAGE)
    bundle = await build_page_bundle(ctx, LOGIN_PAGE, session_service)
    record_page_outcome(request, LOGIN_PAGE, bundle)
    return bundle.model_dump(mode="json", by_alias=True)


@i18n_router.get("/locales")
async def list_locales() -> dict[str, Any]:
    """List supported locales (public)."""
    return {
        "default": DEFAULT_LOCALE,
        "locales": [get_language_info(locale) for locale in SUPPORTED_LOCALES],
    }
