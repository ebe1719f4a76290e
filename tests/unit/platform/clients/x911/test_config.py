"""Unit tests for 911 client configuration."""

from dataclasses import FrozenInstanceError

import pytest

from voip_api.platform.clients.x911.config import Environment, X911ClientConfig


class TestEnvironment:
    """Tests for Environment enum."""

    def test_all_values_exist(self):
        """Both upstream environments exist."""
        assert Environment.SANDBOX == "sandbox"
        assert Environment.PRODUCTION == "production"

    def test_is_string_enum(self):
        """Environment values are usable as strings."""
        assert str(Environment.SANDBOX) == "sandbox"


class TestX911ClientConfig:
    """Tests for X911ClientConfig dataclass."""

    def test_default_values(self):
        """Config defaults to enforced production."""
        config = X911ClientConfig()
        assert config.environment == Environment.PRODUCTION
        assert config.enforce_environment is True

    def test_custom_values(self):
        """Config accepts custom values."""
        config = X911ClientConfig(environment=Environment.SANDBOX, enforce_environment=False)
        assert config.environment == Environment.SANDBOX
        assert config.enforce_environment is False

    def test_is_frozen(self):
        """Config is immutable."""
        config = X911ClientConfig()
        with pytest.raises(FrozenInstanceError):
            config.environment = Environment.SANDBOX  # type: ignore[misc]
