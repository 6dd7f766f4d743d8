"""
Locale helpers

Pure functions over the storefront's fixed locale registry:
- membership test and display labels for supported locale tags
- locale resolution from a route segment and an upstream hint
- Accept-Language header parsing with quality-value (q=) support
"""

from __future__ import annotations

# ── Constants ─────────────────────────────────────────────────────────────────

# Ordered; alternates and locale pickers follow this order
SUPPORTED_LOCALES: tuple[str, ...] = (
    "en-US",
    "en-GB",
    "fr-FR",
    "de-DE",
    "es-ES",
    "it-IT",
    "ja-JP",
    "zh-CN",
    "zh-TW",
    "ko-KR",
)

DEFAULT_LOCALE: str = "en-US"

LOCALE_LABELS: dict[str, str] = {
    "en-US": "English (United States)",
    "en-GB": "English (United Kingdom)",
    "fr-FR": "Français",
    "de-DE": "Deutsch",
    "es-ES": "Español",
    "it-IT": "Italiano",
    "ja-JP": "日本語",
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "ko-KR": "한국어",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def is_supported_locale(value: str | None) -> bool:
    """Return True when ``value`` is exactly one of SUPPORTED_LOCALES.

    Matching is case-sensitive and has no region fallback: "en-us" and
    "fr" are both rejected.
    """
    return value in SUPPORTED_LOCALES


def default_locale() -> str:
    return DEFAULT_LOCALE


def label(locale: str) -> str:
    """Return the display name for a locale, or the tag itself if unknown."""
    return LOCALE_LABELS.get(locale, locale)


def resolve_locale(path_segment: str | None = None, hint: str | None = None) -> str:
    """Pick the locale for a request.

    Order of preference:
    1. ``path_segment``: the locale prefix of the requested path.
    2. ``hint``: a locale already chosen upstream (ancestor stage or headers).
    3. DEFAULT_LOCALE.

    Args:
        path_segment: Raw first path segment, e.g. "de-DE" or "xx-XX".
        hint:         Upstream locale hint, may be None.

    Returns:
        Always a member of SUPPORTED_LOCALES.
    """
    if is_supported_locale(path_segment):
        return path_segment
    if is_supported_locale(hint):
        return hint
    return DEFAULT_LOCALE


def parse_accept_language(header: str, supported: tuple[str, ...] | list[str]) -> str | None:
    """Parse an Accept-Language header and return the best supported locale.

    Algorithm:
    1. Split header into tags with optional q-values (default q=1.0).
    2. Sort by q-value descending.
    3. Return the first tag that is exactly a member of ``supported``.

    Args:
        header:    Value of the Accept-Language HTTP header, e.g.
                   "fr-FR,fr;q=0.9,en-US;q=0.8".
        supported: Ordered locale tags the storefront serves.

    Returns:
        The best matching locale from ``supported``, or None.
    """
    if not header:
        return None

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        if ";q=" in part:
            tag, q_str = part.split(";q=", 1)
            try:
                q = float(q_str.strip())
            except ValueError:
                q = 1.0
        else:
            tag = part
            q = 1.0
        weighted.append((q, tag.strip()))

    # Stable sort keeps header order for equal q
    weighted.sort(key=lambda x: x[0], reverse=True)

    for q, tag in weighted:
        if q > 0 and tag in supported:
            return tag

    return None


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Returns:
        Dict with keys: ``code`` (str), ``name`` (str), ``is_default`` (bool).
    """
    return {
        "code": locale,
        "name": label(locale),
        "is_default": locale == DEFAULT_LOCALE,
    }
