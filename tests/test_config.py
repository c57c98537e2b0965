"""Tests for settings loading."""

import pytest

from salary_slip.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ENGINE_VERSION", "LOG_LEVEL", "DANGER_ZONES"):
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the working directory out of the picture
    monkeypatch.setattr("salary_slip.config.load_dotenv", lambda: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.engine_version == "1.0.0"
        assert settings.log_level == "WARNING"
        assert settings.danger_zones == frozenset()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENGINE_VERSION", "2.3.0")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DANGER_ZONES", "Kabul, Juba,,  Mogadishu ")

        settings = Settings.from_env()

        assert settings.engine_version == "2.3.0"
        assert settings.log_level == "DEBUG"
        assert settings.danger_zones == frozenset({"Kabul", "Juba", "Mogadishu"})

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_settings_are_frozen(self):
        settings = Settings.from_env()
        with pytest.raises(AttributeError):
            settings.log_level = "INFO"
