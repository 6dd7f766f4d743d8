"""
Translation catalog loader

Maps a locale tag to its message bundle. Only the en-US catalog ships
today; every supported locale is served from it until translated
catalogs are added under ``translations/``.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from .locale import DEFAULT_LOCALE, is_supported_locale

logger = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).parent / "translations"


@lru_cache(maxsize=None)
def _read_catalog(locale: str) -> dict[str, str]:
    path = TRANSLATIONS_DIR / f"{locale}.json"
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def load_messages(locale: str) -> dict[str, str]:
    """Return the message bundle for ``locale``.

    Unsupported locales and supported locales without their own catalog
    both fall back to the DEFAULT_LOCALE catalog. A fresh dict is
    returned so callers may not alter the shared catalog.
    """
    if not is_supported_locale(locale):
        locale = DEFAULT_LOCALE

    if not (TRANSLATIONS_DIR / f"{locale}.json").exists():
        logger.debug(f"No catalog for {locale}, using {DEFAULT_LOCALE}")
        locale = DEFAULT_LOCALE

    return dict(_read_catalog(locale))
