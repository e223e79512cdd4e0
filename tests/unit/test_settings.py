"""Unit tests for environment-backed provider settings."""

from unleash_provider.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.unleash_url == ""
        assert settings.auth_token == ""
        assert settings.log_level == "INFO"
        assert settings.request_timeout == 60
        assert settings.verify_ssl is True
        assert not settings.is_debug

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("UNLEASH_URL", "https://unleash.example.com")
        monkeypatch.setenv("AUTH_TOKEN", "*:*.admin")
        monkeypatch.setenv("UNLEASH_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("UNLEASH_VERIFY_SSL", "false")
        monkeypatch.setenv("JSON_LOGS", "true")

        settings = Settings()

        assert settings.unleash_url == "https://unleash.example.com"
        assert settings.auth_token == "*:*.admin"
        assert settings.request_timeout == 5
        assert settings.verify_ssl is False
        assert settings.json_logs is True

    def test_token_not_in_repr(self, monkeypatch):
        monkeypatch.setenv("AUTH_TOKEN", "super-secret")
        assert "super-secret" not in repr(Settings())

    def test_debug_levels(self, monkeypatch):
        for level, expected in [
            ("DEBUG", True),
            ("trace", True),
            ("info", False),
            ("", False),
        ]:
            monkeypatch.setenv("TF_LOG", level)
            assert Settings().is_debug is expected
