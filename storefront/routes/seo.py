"""
SEO Routes

Provides endpoints for sitemap.xml and robots.txt.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from storefront.constants.pages import PAGES
from storefront.services.origin_service import request_origin, resolve_origins
from storefront.services.seo_service import SEOService

router = APIRouter(tags=["SEO"])


def get_seo_service(request: Request) -> SEOService:
    """Build the service around the canonical origin of this request."""
    return SEOService(resolve_origins(request_origin(request)).canonical_origin)


@router.get("/sitemap.xml")
async def get_sitemap(request: Request) -> Response:
    """
    Generate XML sitemap for search engines.

    Lists every page in every supported locale with hreflang alternates.
    """
    sitemap_xml = get_seo_service(request).generate_sitemap(list(PAGES.values()))

    return Response(
        content=sitemap_xml,
        media_type="application/xml",
        headers={"Cache-Control": "public, max-age=3600"},
    )


@router.get("/robots.txt")
async def get_robots_txt(request: Request) -> Response:
    """Generate robots.txt for search engine crawlers."""
    robots_txt = get_seo_service(request).generate_robots_txt()

    return Response(
        content=robots_txt,
        media_type="text/plain",
        headers={"Cache-Control": "public, max-age=86400"},
    )
