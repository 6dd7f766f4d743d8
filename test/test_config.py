"""
Tests for application settings defaults.
"""

from storefront.config import Settings, settings


class TestSettings:
    def test_production_origin_default(self):
        assert Settings.model_fields["production_origin"].default == "https://softblaze.net"

    def test_identity_service_defaults(self):
        assert Settings.model_fields["api_base_url"].default == "http://localhost:8080"
        assert Settings.model_fields["identity_timeout_seconds"].default == 5.0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://api.softblaze.net")
        monkeypatch.setenv("IDENTITY_TIMEOUT_SECONDS", "2.5")

        overridden = Settings()

        assert overridden.api_base_url == "https://api.softblaze.net"
        assert overridden.identity_timeout_seconds == 2.5

    def test_module_settings_instance(self):
        assert isinstance(settings, Settings)
        assert settings.app_name
