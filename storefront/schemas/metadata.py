"""
Page metadata schemas

Immutable value objects produced by the metadata cascade. Field aliases
follow the camelCase names the rendering layer reads.
"""

from pydantic import BaseModel, ConfigDict, Field


class SiteMeta(BaseModel):
    """Site-wide facts for one request, origin-aware but locale-agnostic."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    domain: str
    description: str
    default_locale: str = Field(..., alias="defaultLocale")
    supported_locales: tuple[str, ...] = Field(..., alias="supportedLocales")
    origin: str
    canonical_origin: str = Field(..., alias="canonicalOrigin")
    tagline: str


class SeoMeta(BaseModel):
    """Search-engine metadata for one rendered page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str
    canonical: str
    keywords: tuple[str, ...] = ()
    open_graph_image: str = Field(..., alias="openGraphImage")
    locale: str
    alternates: dict[str, str] | None = None


class PageSeo(BaseModel):
    """Page-specific overrides layered on top of the inherited SeoMeta."""

    model_config = ConfigDict(frozen=True)

    name: str
    suffix: str = ""
    title: str
    description: str
    keywords: tuple[str, ...] = ()
    image: str | None = None
