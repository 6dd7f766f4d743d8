"""
SEO Service

Composes per-page SEO metadata (canonical URL, per-locale alternates,
title/description/keywords) and generates sitemap.xml / robots.txt.

Composition is layered: the locale layout stage computes canonical and
alternates; page stages copy that result and override their own fields.
"""

import logging
from xml.etree.ElementTree import Element, SubElement, tostring  # nosec B405

from storefront.constants.site import DEFAULT_KEYWORDS, OG_IMAGE_PATH
from storefront.i18n.locale import DEFAULT_LOCALE, SUPPORTED_LOCALES
from storefront.schemas.metadata import PageSeo, SeoMeta, SiteMeta

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def build_suffix(path: str) -> str:
    """Strip the leading locale segment from a path.

    "/en-US" -> "", "/en-US/login" -> "/login", "/de-DE//a/b/" -> "/a/b".
    """
    segments = [segment for segment in path.split("/") if segment]
    rest = segments[1:]
    if not rest:
        return ""
    return "/" + "/".join(rest)


def _with_query(url: str, query: str) -> str:
    query = query.lstrip("?")
    return f"{url}?{query}" if query else url


def build_alternates(canonical_origin: str, suffix: str) -> dict[str, str]:
    """One URL per supported locale for the same document, without querystring."""
    return {locale: f"{canonical_origin}/{locale}{suffix}" for locale in SUPPORTED_LOCALES}


def compose_layout_seo(site: SiteMeta, locale: str, suffix: str, query: str = "") -> SeoMeta:
    """
    Build the default SeoMeta for the locale-scoped layout.

    This is the only stage that computes ``alternates``.

    Args:
        site: Resolved site metadata (provides canonical_origin)
        locale: Resolved locale tag
        suffix: Request path without its locale segment
        query: Raw querystring, kept on canonical only

    Returns:
        SeoMeta with site-level title, description and keywords
    """
    origin = site.canonical_origin
    return SeoMeta(
        title=f"{site.name} — {site.tagline}",
        description=site.description,
        canonical=_with_query(f"{origin}/{locale}{suffix}", query),
        keywords=DEFAULT_KEYWORDS,
        open_graph_image=f"{origin}{OG_IMAGE_PATH}",
        locale=locale,
        alternates=build_alternates(origin, suffix),
    )


def compose_page_seo(
    parent: SeoMeta | None,
    site: SiteMeta,
    locale: str,
    path: str,
    query: str,
    page: PageSeo,
) -> SeoMeta:
    """
    Layer a page's overrides on the SeoMeta inherited from the layout.

    Title, description and keywords always come from ``page``; the image
    only when the page supplies one. Canonical, image, locale and
    alternates are inherited from ``parent`` and only rebuilt from the
    site when there is no parent.
    """
    if parent is None:
        origin = site.canonical_origin
        parent = SeoMeta(
            title=page.title,
            description=page.description,
            canonical=_with_query(f"{origin}{path}", query),
            open_graph_image=f"{origin}{OG_IMAGE_PATH}",
            locale=locale,
        )

    update = {
        "title": page.title,
        "description": page.description,
        "keywords": page.keywords,
    }
    if page.image:
        update["open_graph_image"] = page.image

    return parent.model_copy(update=update)


class SEOService:
    """Service for generating crawler-facing documents."""

    def __init__(self, canonical_origin: str):
        self.canonical_origin = canonical_origin.rstrip("/")

    def generate_sitemap(self, pages: list[PageSeo]) -> str:
        """
        Generate an XML sitemap listing every page in every locale.

        Each <url> carries xhtml:link alternates for all supported locales
        plus x-default pointing at the default locale.

        Returns:
            XML string in sitemap format
        """
        urlset = Element("urlset")
        urlset.set("xmlns", SITEMAP_NS)
        urlset.set("xmlns:xhtml", XHTML_NS)

        for page in pages:
            alternates = build_alternates(self.canonical_origin, page.suffix)
            for locale in SUPPORTED_LOCALES:
                url = SubElement(urlset, "url")
                loc = SubElement(url, "loc")
                loc.text = alternates[locale]
                for alt_locale, href in alternates.items():
                    self._add_alternate(url, alt_locale, href)
                self._add_alternate(url, "x-default", alternates[DEFAULT_LOCALE])

                changefreq = SubElement(url, "changefreq")
                changefreq.text = "weekly"
                priority = SubElement(url, "priority")
                priority.text = "1.0" if not page.suffix else "0.6"

        xml_declaration = '<?xml version="1.0" encoding="UTF-8"?>\n'
        xml_content = tostring(urlset, encoding="unicode")

        logger.info(f"Generated sitemap with {len(pages) * len(SUPPORTED_LOCALES)} urls")
        return xml_declaration + xml_content

    def generate_robots_txt(self) -> str:
        """
        Generate robots.txt content.

        Returns:
            robots.txt content string
        """
        lines = [
            "User-agent: *",
            "Allow: /",
            "",
            "# Disallow API paths",
            "Disallow: /api/",
            "",
            "# Sitemap",
            f"Sitemap: {self.canonical_origin}/sitemap.xml",
        ]
        return "\n".join(lines)

    @staticmethod
    def _add_alternate(url: Element, hreflang: str, href: str) -> None:
        link = SubElement(url, "xhtml:link")
        link.set("rel", "alternate")
        link.set("hreflang", hreflang)
        link.set("href", href)
