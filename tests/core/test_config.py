"""Tests for runtime configuration."""

import pytest
from pydantic import ValidationError

from entityshelf import EntityConfig, configure, get_config, reset_config


class TestConfig:
    """Tests for configure/get_config/reset_config."""

    def test_defaults(self):
        config = get_config()
        assert config.safe_mode is True
        assert config.auto_load is True

    def test_configure_and_reset(self):
        configure(safe_mode=False)
        assert get_config().safe_mode is False
        assert get_config().auto_load is True

        reset_config()
        assert get_config().safe_mode is True

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown key"):
            configure(verbose=True)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENTITYSHELF_SAFE_MODE", "off")
        monkeypatch.setenv("ENTITYSHELF_AUTO_LOAD", "Yes")

        config = EntityConfig()
        assert config.safe_mode is False
        assert config.auto_load is True
        assert reset_config().safe_mode is False

    def test_environment_invalid_boolean(self, monkeypatch):
        monkeypatch.setenv("ENTITYSHELF_SAFE_MODE", "maybe")
        with pytest.raises(ValidationError):
            EntityConfig()

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            get_config().safe_mode = False
