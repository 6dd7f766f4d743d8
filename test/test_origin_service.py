"""
Tests for origin and canonical-origin resolution.
"""

from unittest.mock import MagicMock

import pytest

from storefront.services.origin_service import Origins, is_local_origin, request_origin, resolve_origins

PRODUCTION = "https://softblaze.net"


class TestResolveOrigins:
    @pytest.mark.parametrize("raw", [None, "", "null"])
    def test_missing_origin_uses_production_for_both(self, raw):
        assert resolve_origins(raw) == Origins(origin=PRODUCTION, canonical_origin=PRODUCTION)

    @pytest.mark.parametrize(
        "raw",
        [
            "http://localhost",
            "http://localhost:5173",
            "https://localhost:8443",
            "http://127.0.0.1:8000",
            "http://0.0.0.0:3000",
            "https://0.0.0.0",
        ],
    )
    def test_local_origin_keeps_raw_origin_but_canonical_is_production(self, raw):
        origins = resolve_origins(raw)
        assert origins.origin == raw
        assert origins.canonical_origin == PRODUCTION

    @pytest.mark.parametrize(
        "raw",
        [
            "https://softblaze.net",
            "https://staging.softblaze.net",
            "http://localhost.example.com",
            "http://127.0.0.10:8000",
        ],
    )
    def test_public_origin_is_its_own_canonical(self, raw):
        assert resolve_origins(raw) == Origins(origin=raw, canonical_origin=raw)

    def test_production_origin_override(self):
        origins = resolve_origins("http://localhost:5173", production_origin="https://shop.example")
        assert origins.canonical_origin == "https://shop.example"


class TestIsLocalOrigin:
    def test_case_insensitive(self):
        assert is_local_origin("HTTP://LOCALHOST:5173") is True

    def test_bare_host_without_scheme_is_not_matched(self):
        assert is_local_origin("localhost:5173") is False


class TestRequestOrigin:
    def test_scheme_and_netloc(self):
        request = MagicMock()
        request.url.scheme = "https"
        request.url.netloc = "softblaze.net"
        assert request_origin(request) == "https://softblaze.net"

    def test_no_host(self):
        request = MagicMock()
        request.url.scheme = "http"
        request.url.netloc = ""
        assert request_origin(request) is None
