"""
Internationalization Tests

Pure unit tests; the middleware tests mount LanguageMiddleware on a
throwaway FastAPI app.

Test classes:
    TestLocaleRegistry     — supported set, default, labels
    TestLocaleResolver     — path segment / hint / default precedence
    TestAcceptLanguage     — quality-weighted header parsing
    TestTranslationCatalog — message bundle loading and fallback
    TestLanguageMiddleware — request.state.locale_hint detection
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from storefront.i18n.catalog import load_messages
from storefront.i18n.locale import (
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
from storefront.middleware.language import LanguageMiddleware

# ══════════════════════════════════════════════════════════════════════════════
# 1. TestLocaleRegistry
# ══════════════════════════════════════════════════════════════════════════════


class TestLocaleRegistry:
    def test_ten_locales_in_fixed_order(self):
        assert SUPPORTED_LOCALES == (
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

    def test_default_is_en_us(self):
        assert default_locale() == "en-US"
        assert DEFAULT_LOCALE in SUPPORTED_LOCALES

    @pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
    def test_every_supported_locale_is_supported_and_labelled(self, locale):
        assert is_supported_locale(locale) is True
        assert label(locale)

    @pytest.mark.parametrize("value", ["xx-XX", "en-us", "EN-US", "en", "fr", " en-US", "", None])
    def test_non_members_are_rejected(self, value):
        assert is_supported_locale(value) is False

    def test_labels_cover_registry_exactly(self):
        assert set(LOCALE_LABELS) == set(SUPPORTED_LOCALES)

    def test_label_of_unknown_locale_is_the_tag(self):
        assert label("xx-XX") == "xx-XX"

    def test_language_info(self):
        info = get_language_info("de-DE")
        assert info == {"code": "de-DE", "name": "Deutsch", "is_default": False}
        assert get_language_info("en-US")["is_default"] is True


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestLocaleResolver
# ══════════════════════════════════════════════════════════════════════════════


class TestLocaleResolver:
    def test_path_segment_wins(self):
        assert resolve_locale("ja-JP", "fr-FR") == "ja-JP"

    def test_hint_used_when_segment_unsupported(self):
        assert resolve_locale("xx-XX", "fr-FR") == "fr-FR"

    def test_hint_used_when_segment_missing(self):
        assert resolve_locale(None, "ko-KR") == "ko-KR"

    def test_unsupported_segment_falls_back_to_default(self):
        assert resolve_locale("xx-XX") == "en-US"

    def test_unsupported_segment_and_hint_fall_back_to_default(self):
        assert resolve_locale("xx-XX", "yy-YY") == "en-US"

    def test_nothing_given(self):
        assert resolve_locale() == "en-US"

    def test_no_region_fallback(self):
        assert resolve_locale("de", "de-AT") == "en-US"


# ══════════════════════════════════════════════════════════════════════════════
# 3. TestAcceptLanguage
# ══════════════════════════════════════════════════════════════════════════════


class TestAcceptLanguage:
    def test_exact_match(self):
        assert parse_accept_language("fr-FR", SUPPORTED_LOCALES) == "fr-FR"

    def test_quality_ordering(self):
        header = "de-DE;q=0.7,ja-JP;q=0.9,fr-FR;q=0.8"
        assert parse_accept_language(header, SUPPORTED_LOCALES) == "ja-JP"

    def test_skips_unsupported_tags(self):
        assert parse_accept_language("pt-BR,es-ES;q=0.5", SUPPORTED_LOCALES) == "es-ES"

    def test_base_language_is_not_matched(self):
        assert parse_accept_language("fr", SUPPORTED_LOCALES) is None

    def test_zero_quality_excluded(self):
        assert parse_accept_language("it-IT;q=0", SUPPORTED_LOCALES) is None

    def test_bad_quality_defaults_to_one(self):
        assert parse_accept_language("en-GB;q=abc,de-DE;q=0.9", SUPPORTED_LOCALES) == "en-GB"

    def test_empty_header(self):
        assert parse_accept_language("", SUPPORTED_LOCALES) is None


# ══════════════════════════════════════════════════════════════════════════════
# 4. TestTranslationCatalog
# ══════════════════════════════════════════════════════════════════════════════


class TestTranslationCatalog:
    def test_default_catalog_has_page_strings(self):
        messages = load_messages("en-US")
        for key in ("nav.home", "nav.login", "home.heading", "login.heading", "login.github"):
            assert messages[key]

    def test_supported_locale_without_catalog_uses_default(self):
        assert load_messages("ko-KR") == load_messages("en-US")

    def test_unknown_locale_uses_default(self):
        assert load_messages("xx-XX") == load_messages("en-US")

    def test_returned_bundle_is_a_copy(self):
        messages = load_messages("en-US")
        messages["nav.home"] = "changed"
        assert load_messages("en-US")["nav.home"] != "changed"


# ══════════════════════════════════════════════════════════════════════════════
# 5. TestLanguageMiddleware
# ══════════════════════════════════════════════════════════════════════════════


def _hint_app() -> FastAPI:
    app = FastAPI()

    @app.get("/hint")
    async def hint(request: Request):
        return {"hint": request.state.locale_hint}

    app.add_middleware(LanguageMiddleware)
    return app


class TestLanguageMiddleware:
    def test_x_language_header(self):
        client = TestClient(_hint_app())
        response = client.get("/hint", headers={"X-Language": "zh-TW"})
        assert response.json() == {"hint": "zh-TW"}

    def test_unsupported_x_language_falls_through_to_accept_language(self):
        client = TestClient(_hint_app())
        response = client.get("/hint", headers={"X-Language": "xx-XX", "Accept-Language": "it-IT"})
        assert response.json() == {"hint": "it-IT"}

    def test_accept_language_header(self):
        client = TestClient(_hint_app())
        response = client.get("/hint", headers={"Accept-Language": "es-ES,en-US;q=0.5"})
        assert response.json() == {"hint": "es-ES"}

    def test_no_headers(self):
        client = TestClient(_hint_app())
        response = client.get("/hint", headers={"Accept-Language": ""})
        assert response.json() == {"hint": None}
