"""
Route dependencies

Locale route matcher, identity-service client and request context
construction shared by the page and page-data routers.
"""

from fastapi import Request

from storefront.exceptions import LocaleNotSupportedError
from storefront.i18n.locale import is_supported_locale
from storefront.schemas.metadata import PageSeo
from storefront.services.metadata_service import PageBundle, RequestContext
from storefront.services.origin_service import request_origin
from storefront.services.session_service import SessionService


def require_supported_locale(locale: str) -> str:
    """Admit only supported locale tags as the leading path segment."""
    if not is_supported_locale(locale):
        raise LocaleNotSupportedError(locale)
    return locale


def get_session_service() -> SessionService:
    return SessionService()


def record_page_outcome(request: Request, page: PageSeo, bundle: PageBundle) -> None:
    """Leave the resolved page, locale and session state for the access log."""
    request.state.page_outcome = {
        "page": page.name,
        "locale": bundle.locale,
        "session": "signed_in" if bundle.session else "anonymous",
    }


def build_request_context(request: Request, locale: str, page: PageSeo) -> RequestContext:
    """Collect the raw inputs of a page request.

    ``path`` is the page's own locale-prefixed path, so the JSON page-data
    routes resolve the same canonical URL as the HTML page.
    """
    return RequestContext(
        origin=request_origin(request),
        path=f"/{locale}{page.suffix}",
        query=request.url.query,
        cookie_header=request.headers.get("cookie"),
        locale_param=locale,
        locale_hint=getattr(request.state, "locale_hint", None),
    )
