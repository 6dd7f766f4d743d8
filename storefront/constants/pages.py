"""
Page Constants

SEO overrides for each storefront page. ``suffix`` is the path after the
locale segment.
"""

from storefront.schemas.metadata import PageSeo

HOME_PAGE = PageSeo(
    name="home",
    suffix="",
    title="Softblaze — Instant Digital Activation Codes for Premium Software",
    description=(
        "Purchase authentic activation codes with instant delivery. Softblaze covers operating systems, "
        "productivity suites, creative software, and security tools for teams of any size."
    ),
    keywords=(
        "software activation codes",
        "digital license keys",
        "instant software delivery",
        "Softblaze marketplace",
    ),
)

LOGIN_PAGE = PageSeo(
    name="login",
    suffix="/login",
    title="Sign in to Softblaze — Access Your Digital Licenses",
    description=(
        "Log into Softblaze to download activation codes, review invoices, and manage software "
        "licenses from one secure dashboard."
    ),
    keywords=(
        "Softblaze login",
        "software license dashboard",
        "digital activation code management",
        "software license invoices",
    ),
)

PAGES: dict[str, PageSeo] = {page.name: page for page in (HOME_PAGE, LOGIN_PAGE)}
