"""Unit tests for settings and production checks."""

import pytest

from pastethread.config import AuthSettings, Settings
from pastethread.util.error import ConfigurationError
from pastethread.util.observability import check_production_settings


class TestSettings:
    """Environment driven configuration."""

    def test_nested_comment_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("COMMENTS__SIBLING_ORDER", "like_count")
        monkeypatch.setenv("COMMENTS__MAX_LENGTH", "280")

        settings = Settings()

        assert settings.comments.sibling_order == "like_count"
        assert settings.comments.max_length == 280

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COMMENTS__SIBLING_ORDER", raising=False)
        monkeypatch.delenv("COMMENTS__ORPHAN_POLICY", raising=False)

        settings = Settings()

        assert settings.comments.sibling_order == "created_at"
        assert settings.comments.orphan_policy == "promote"


class TestCheckProductionSettings:
    """Refusing insecure defaults outside development."""

    def test_default_secret_refused_in_production(self):
        settings = Settings(environment="production", auth=AuthSettings())

        with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
            check_production_settings(settings)

    def test_custom_secret_allowed_in_production(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret="s3cret")
        )

        check_production_settings(settings)

    def test_default_secret_allowed_in_development(self):
        check_production_settings(Settings(environment="development", auth=AuthSettings()))
