"""Constants package for the storefront."""

from .pages import HOME_PAGE, LOGIN_PAGE, PAGES
from .site import (
    DEFAULT_KEYWORDS,
    OG_IMAGE_PATH,
    SITE_DESCRIPTION,
    SITE_DOMAIN,
    SITE_NAME,
    SITE_TAGLINE,
)

__all__ = [
    # Site constants
    "SITE_NAME",
    "SITE_DOMAIN",
    "SITE_DESCRIPTION",
    "SITE_TAGLINE",
    "DEFAULT_KEYWORDS",
    "OG_IMAGE_PATH",
    # Page constants
    "HOME_PAGE",
    "LOGIN_PAGE",
    "PAGES",
]
