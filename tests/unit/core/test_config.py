"""Tests for ytlookup.core.config module."""

import pytest
from pydantic import ValidationError

from ytlookup.core.config import Config, get_config, reset_config


@pytest.mark.unit
def test_config_default_values(monkeypatch):
    """Test that config has correct default values."""
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("APP_NAME", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = Config(_env_file=None, youtube_api_key="key")

    assert config.app_name == "YouTube Lookup"
    assert config.app_env == "development"
    assert config.debug is False
    assert config.log_level == "INFO"
    assert config.api_port == 3000


@pytest.mark.unit
def test_missing_api_key_is_fatal(monkeypatch):
    """Test that building config without an API key fails validation."""
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)

    with pytest.raises(ValidationError):
        Config(_env_file=None)


@pytest.mark.unit
def test_empty_api_key_is_rejected():
    """Test that an empty API key does not pass validation."""
    with pytest.raises(ValidationError):
        Config(_env_file=None, youtube_api_key="")


@pytest.mark.unit
def test_api_key_from_youtube_env(monkeypatch):
    """Test reading the key from YOUTUBE_API_KEY."""
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")

    config = Config(_env_file=None)

    assert config.youtube_api_key == "from-env"


@pytest.mark.unit
def test_api_key_from_legacy_env(monkeypatch):
    """Test reading the key from the legacy API_KEY variable."""
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "legacy")

    config = Config(_env_file=None)

    assert config.youtube_api_key == "legacy"


@pytest.mark.unit
def test_config_is_development():
    """Test is_development property."""
    config = Config(youtube_api_key="key", app_env="development")
    assert config.is_development is True

    config = Config(youtube_api_key="key", app_env="production")
    assert config.is_development is False


@pytest.mark.unit
def test_config_is_production():
    """Test is_production property."""
    config = Config(youtube_api_key="key", app_env="production")
    assert config.is_production is True


@pytest.mark.unit
def test_config_port_constraints():
    """Test API port bounds."""
    with pytest.raises(ValidationError):
        Config(youtube_api_key="key", api_port=0)
    with pytest.raises(ValidationError):
        Config(youtube_api_key="key", api_port=70000)


@pytest.mark.unit
def test_get_config_is_cached():
    """Test get_config returns the same instance until reset."""
    first = get_config()
    assert get_config() is first

    reset_config()
    try:
        assert get_config() is not first
    finally:
        reset_config()
