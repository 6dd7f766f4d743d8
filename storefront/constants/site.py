"""
Site Constants

Static storefront identity used to build SiteMeta and the layout-level
SEO defaults.
"""

SITE_NAME = "Softblaze"
SITE_DOMAIN = "softblaze.net"
SITE_DESCRIPTION = (
    "Softblaze delivers instant digital activation codes for essential software suites, "
    "operating systems, and productivity tools."
)
SITE_TAGLINE = "Instant digital activation codes for the tools you rely on."

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "digital software licenses",
    "software activation codes",
    "instant delivery license keys",
    "Softblaze",
)

# Relative to the canonical origin
OG_IMAGE_PATH = "/og-softblaze.svg"
