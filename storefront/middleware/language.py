"""
Language Detection Middleware

Sets request.state.locale_hint from:
  1. X-Language request header (exact match against SUPPORTED_LOCALES)
  2. Accept-Language header (quality-weighted, exact tags only)
  3. None when neither names a supported locale

The hint never overrides a locale-prefixed path; it only feeds the
locale resolver as the upstream preference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from storefront.i18n.locale import SUPPORTED_LOCALES, is_supported_locale, parse_accept_language

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response


class LanguageMiddleware(BaseHTTPMiddleware):
    """Attach the visitor's preferred supported locale to request.state.locale_hint."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        hint = request.headers.get("X-Language", "").strip()
        if not is_supported_locale(hint):
            hint = parse_accept_language(request.headers.get("Accept-Language", ""), SUPPORTED_LOCALES)
        request.state.locale_hint = hint
        return await call_next(request)
