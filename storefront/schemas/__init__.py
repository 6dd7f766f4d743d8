from .metadata import PageSeo, SeoMeta, SiteMeta
from .session import SessionPayload, SessionUser

__all__ = [
    "PageSeo",
    "SeoMeta",
    "SessionPayload",
    "SessionUser",
    "SiteMeta",
]
