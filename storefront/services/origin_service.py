"""
Origin Service

Derives the request origin and the canonical origin advertised to search
engines. Local development addresses are mapped to the production origin
so canonical and alternate links keep their production shape.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from storefront.config import settings

if TYPE_CHECKING:
    from starlette.requests import Request

# scheme://host[:port] where host is a loopback or wildcard address
LOCAL_ORIGIN_PATTERN = re.compile(
    r"^[a-z][a-z0-9+.\-]*://(localhost|127\.0\.0\.1|0\.0\.0\.0)(:\d+)?(/.*)?$",
    re.IGNORECASE,
)


class Origins(NamedTuple):
    origin: str
    canonical_origin: str


def is_local_origin(origin: str) -> bool:
    return bool(LOCAL_ORIGIN_PATTERN.match(origin))


def resolve_origins(raw_origin: str | None, production_origin: str | None = None) -> Origins:
    """Resolve ``(origin, canonical_origin)`` for a raw request origin.

    Args:
        raw_origin:        Origin the request arrived on, e.g. "http://localhost:5173".
                           None, "" and "null" mean no usable origin.
        production_origin: Override for settings.production_origin.

    Returns:
        Origins; canonical_origin is the production origin for local addresses.
    """
    production = production_origin or settings.production_origin

    if not raw_origin or raw_origin == "null":
        return Origins(origin=production, canonical_origin=production)

    canonical = production if is_local_origin(raw_origin) else raw_origin
    return Origins(origin=raw_origin, canonical_origin=canonical)


def request_origin(request: Request) -> str | None:
    """Return ``scheme://host[:port]`` for a request, or None without a host."""
    netloc = request.url.netloc
    if not netloc:
        return None
    return f"{request.url.scheme}://{netloc}"
