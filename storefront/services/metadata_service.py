"""
Metadata Service

Runs the per-request metadata cascade:

    resolve_root: SiteMeta from the request origin (locale-agnostic)
    resolve_layout: locale, layout SEO (canonical + alternates), session
    resolve_page: page-specific SEO layered on the layout SEO

Each stage takes the bundle produced by its ancestor and returns a new
bundle; fields are only ever added or overridden.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from storefront.constants.site import SITE_DESCRIPTION, SITE_DOMAIN, SITE_NAME, SITE_TAGLINE
from storefront.i18n.locale import DEFAULT_LOCALE, LOCALE_LABELS, SUPPORTED_LOCALES, resolve_locale
from storefront.schemas.metadata import PageSeo, SeoMeta, SiteMeta
from storefront.schemas.session import SessionPayload
from storefront.services.origin_service import resolve_origins
from storefront.services.seo_service import build_suffix, compose_layout_seo, compose_page_seo
from storefront.services.session_service import LOGIN_PATH

if TYPE_CHECKING:
    from storefront.services.session_service import SessionService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Raw inputs of one page request."""

    origin: str | None
    path: str
    query: str = ""
    cookie_header: str | None = None
    locale_param: str | None = None
    locale_hint: str | None = None


class PageBundle(BaseModel):
    """Everything the rendering layer reads for one page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    session: SessionPayload | None = None
    login_url: str = Field(LOGIN_PATH, alias="loginUrl")
    locale: str | None = None
    available_locales: tuple[str, ...] = Field(SUPPORTED_LOCALES, alias="availableLocales")
    locale_labels: dict[str, str] = Field(default_factory=lambda: dict(LOCALE_LABELS), alias="localeLabels")
    site: SiteMeta | None = None
    seo: SeoMeta | None = None


def build_site_meta(raw_origin: str | None) -> SiteMeta:
    origins = resolve_origins(raw_origin)
    return SiteMeta(
        name=SITE_NAME,
        domain=SITE_DOMAIN,
        description=SITE_DESCRIPTION,
        default_locale=DEFAULT_LOCALE,
        supported_locales=SUPPORTED_LOCALES,
        origin=origins.origin,
        canonical_origin=origins.canonical_origin,
        tagline=SITE_TAGLINE,
    )


def resolve_root(ctx: RequestContext, bundle: PageBundle | None = None) -> PageBundle:
    """Stage 1: attach SiteMeta derived from the request origin."""
    bundle = bundle or PageBundle()
    return bundle.model_copy(update={"site": build_site_meta(ctx.origin)})


def resolve_layout(
    bundle: PageBundle,
    ctx: RequestContext,
    session: SessionPayload | None = None,
    login_url: str | None = None,
) -> PageBundle:
    """
    Stage 2: resolve the locale and compute the layout-level SEO.

    The locale hint is the locale an ancestor already chose, falling back
    to the header-derived hint on the request context.
    """
    site = bundle.site or build_site_meta(ctx.origin)
    locale = resolve_locale(ctx.locale_param, bundle.locale or ctx.locale_hint)
    seo = compose_layout_seo(site, locale, build_suffix(ctx.path), ctx.query)

    update = {
        "site": site,
        "locale": locale,
        "available_locales": SUPPORTED_LOCALES,
        "locale_labels": dict(LOCALE_LABELS),
        "seo": seo,
    }
    if session is not None:
        update["session"] = session
    if login_url is not None:
        update["login_url"] = login_url
    return bundle.model_copy(update=update)


def resolve_page(bundle: PageBundle, ctx: RequestContext, page: PageSeo) -> PageBundle:
    """Stage 3: layer page-specific SEO on the inherited layout SEO."""
    site = bundle.site or build_site_meta(ctx.origin)
    locale = bundle.locale or (bundle.seo.locale if bundle.seo else None) or site.default_locale
    seo = compose_page_seo(bundle.seo, site, locale, ctx.path, ctx.query, page)
    return bundle.model_copy(update={"seo": seo})


async def build_page_bundle(
    ctx: RequestContext,
    page: PageSeo,
    session_service: SessionService,
) -> PageBundle:
    """
    Run the full cascade for one page request.

    The session lookup starts first and runs while the SEO stages compute.
    Its outcome never affects SEO resolution; a failed lookup leaves
    ``session`` as None.
    """
    session_task = asyncio.create_task(session_service.fetch_session(ctx.cookie_header))
    try:
        root = resolve_root(ctx)
        layout = resolve_layout(root, ctx)
        bundle = resolve_page(layout, ctx, page)
    except Exception:
        session_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await session_task
        raise

    session = await session_task
    login_url = session_service.login_url if session_service.enabled else LOGIN_PATH

    logger.debug(
        f"Resolved {page.name} page for {bundle.locale} (session={'yes' if session else 'anonymous'})"
    )
    return bundle.model_copy(update={"session": session, "login_url": login_url})
