"""
i18n package

Locale registry, locale resolution, Accept-Language parsing and the
translation catalog loader for the storefront.
"""

from .catalog import load_messages
from .locale import (
    DEFAULT_LOCALE,
    LOCALE_LABELS,
    SUPPORTED_LOCALES,
    default_locale,
    get_language_info,
    is_supported_locale,
    label,
    parse_accept_language,
    resolve_locale,
)

__all__ = [
    "DEFAULT_LOCALE",
    "LOCALE_LABELS",
    "SUPPORTED_LOCALES",
    "default_locale",
    "get_language_info",
    "is_supported_locale",
    "label",
    "load_messages",
    "parse_accept_language",
    "resolve_locale",
]
